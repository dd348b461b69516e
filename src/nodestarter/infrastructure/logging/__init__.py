"""
Logging setup for the bootstrap process.
"""

from .logging_setup import DEFAULT_FORMAT, configure_logging

__all__ = ["DEFAULT_FORMAT", "configure_logging"]
