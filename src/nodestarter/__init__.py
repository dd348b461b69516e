# nodestarter/__init__.py
"""
nodestarter - 去中心化媒体处理网络节点的启动引导层

- 密钥库定位与账户地址识别
- 端点本地/远程分类
- 广播者价格表解析
- 链上编排者注册信息同步到本地存储
"""

from __future__ import annotations

__version__ = "0.1.0"


# 延迟导入以避免循环依赖
def __getattr__(name: str):
    """延迟导入模块"""
    if name == "resolve_keystore_path":
        from nodestarter.domain.keystore import resolve_keystore_path
        return resolve_keystore_path
    if name == "is_local_url":
        from nodestarter.domain.network import is_local_url
        return is_local_url
    if name == "parse_broadcaster_prices":
        from nodestarter.domain.pricing import parse_broadcaster_prices
        return parse_broadcaster_prices
    if name == "setup_orchestrator":
        from nodestarter.application.workflows.orchestrator_sync import setup_orchestrator
        return setup_orchestrator
    if name == "bootstrap_node":
        from nodestarter.application.workflows.node_bootstrap import bootstrap_node
        return bootstrap_node
    raise AttributeError(f"module 'nodestarter' has no attribute '{name}'")


__all__ = [
    "__version__",
    "resolve_keystore_path",
    "is_local_url",
    "parse_broadcaster_prices",
    "setup_orchestrator",
    "bootstrap_node",
]
