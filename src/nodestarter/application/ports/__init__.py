from .chain_query_port import ChainQueryPort
from .orchestrator_store_port import OrchestratorStorePort

__all__ = ["ChainQueryPort", "OrchestratorStorePort"]
