"""
Orchestrator persistence: SQLAlchemy-backed store and an in-memory variant.
"""

from .memory_store import InMemoryOrchestratorStore
from .models import Base, OrchestratorModel
from .orchestrator_store import SqlAlchemyOrchestratorStore
from .sqlalchemy_db import SessionProvider, create_db_engine, get_db_url

__all__ = [
    "InMemoryOrchestratorStore",
    "Base",
    "OrchestratorModel",
    "SqlAlchemyOrchestratorStore",
    "SessionProvider",
    "create_db_engine",
    "get_db_url",
]
