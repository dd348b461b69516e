# nodestarter/config/__init__.py

from .models import (
    DEFAULT_DB_URL,
    ChainConfig,
    DatabaseConfig,
    KeystoreConfig,
    LoggingConfig,
    NetworkConfig,
    NodeStarterConfig,
    PricingConfig,
)
from .settings import ENV_OVERRIDES, create_config, load_environment_variables

__all__ = [
    "DEFAULT_DB_URL",
    "ChainConfig",
    "DatabaseConfig",
    "KeystoreConfig",
    "LoggingConfig",
    "NetworkConfig",
    "NodeStarterConfig",
    "PricingConfig",
    "ENV_OVERRIDES",
    "create_config",
    "load_environment_variables",
]
