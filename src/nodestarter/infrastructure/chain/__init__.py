"""
Chain query clients: a deterministic stub and the networked subgraph client.
"""

from .stub_client import StubChainClient
from .subgraph_client import SubgraphChainClient

__all__ = ["StubChainClient", "SubgraphChainClient"]
