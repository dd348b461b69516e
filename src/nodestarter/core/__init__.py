"""
核心层：依赖注入、错误处理。
"""

from .di import Container, inject, bootstrap_dependencies
from .errors import (
    ErrorSeverity,
    NodeStarterError,
    KeystoreNotFoundError,
    KeystoreParseError,
    InvalidAddressError,
    URLParseError,
    ChainQueryError,
    RoundConversionError,
    PriceListParseError,
    Result,
)

__all__ = [
    # 依赖注入
    "Container",
    "inject",
    "bootstrap_dependencies",
    # 错误
    "ErrorSeverity",
    "NodeStarterError",
    "KeystoreNotFoundError",
    "KeystoreParseError",
    "InvalidAddressError",
    "URLParseError",
    "ChainQueryError",
    "RoundConversionError",
    "PriceListParseError",
    "Result",
]
