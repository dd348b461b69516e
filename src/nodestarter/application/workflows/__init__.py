from .node_bootstrap import BootstrapResult, bootstrap_node
from .orchestrator_sync import OrchestratorSync, setup_orchestrator

__all__ = ["BootstrapResult", "bootstrap_node", "OrchestratorSync", "setup_orchestrator"]
