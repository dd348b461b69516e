"""
基础设施层 - 链查询客户端、持久化存储、日志配置。
"""

from .chain import StubChainClient, SubgraphChainClient
from .logging import configure_logging
from .stores import InMemoryOrchestratorStore, SqlAlchemyOrchestratorStore

__all__ = [
    "StubChainClient",
    "SubgraphChainClient",
    "configure_logging",
    "InMemoryOrchestratorStore",
    "SqlAlchemyOrchestratorStore",
]
