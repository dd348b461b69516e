"""
应用层：端口定义与启动工作流。
"""
