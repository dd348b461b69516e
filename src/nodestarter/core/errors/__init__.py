"""
统一错误模块。
"""

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
