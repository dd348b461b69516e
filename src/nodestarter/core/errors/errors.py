"""
统一错误与 Result 封装，启动流程按严重级别决定中断或降级。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, TypeVar, Union, cast


class ErrorSeverity(Enum):
    WARNING = "warning"      # 可继续
    ERROR = "error"          # 当前操作失败
    CRITICAL = "critical"    # 启动终止


@dataclass(eq=False)
class NodeStarterError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass(eq=False)
class KeystoreNotFoundError(NodeStarterError):
    message: str = "provided -ethKeystorePath was not found"
    severity: ErrorSeverity = ErrorSeverity.CRITICAL
    code: str = "KEYSTORE_NOT_FOUND"


@dataclass(eq=False)
class KeystoreParseError(NodeStarterError):
    message: str = "error parsing address from keyfile"
    severity: ErrorSeverity = ErrorSeverity.CRITICAL
    code: str = "KEYSTORE_PARSE_ERROR"


@dataclass(eq=False)
class InvalidAddressError(NodeStarterError):
    code: str = "INVALID_ADDRESS"


@dataclass(eq=False)
class URLParseError(NodeStarterError):
    code: str = "URL_PARSE_ERROR"


@dataclass(eq=False)
class ChainQueryError(NodeStarterError):
    code: str = "CHAIN_QUERY_ERROR"


@dataclass(eq=False)
class RoundConversionError(NodeStarterError):
    code: str = "ROUND_CONVERSION_ERROR"


@dataclass(eq=False)
class PriceListParseError(NodeStarterError):
    severity: ErrorSeverity = ErrorSeverity.WARNING
    code: str = "PRICE_LIST_PARSE_ERROR"


T = TypeVar("T")
E = TypeVar("E", bound=NodeStarterError)


@dataclass
class Result(Generic[T, E]):
    """函数式结果封装，调用方可选择以值而非异常处理失败。"""

    _value: Union[T, E]
    _is_ok: bool

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_value=error, _is_ok=False)

    @classmethod
    def capture(cls, fn, *args, **kwargs) -> "Result[T, NodeStarterError]":
        """调用 fn，将 NodeStarterError 转为 err 结果，其余异常照常抛出。"""
        try:
            return cls.ok(fn(*args, **kwargs))
        except NodeStarterError as exc:
            return cls.err(exc)  # type: ignore[arg-type]

    def is_ok(self) -> bool:
        return self._is_ok

    def error(self) -> E | None:
        return None if self._is_ok else cast(E, self._value)

    def unwrap(self) -> T:
        if not self._is_ok:
            raise cast(E, self._value)
        return cast(T, self._value)

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_ok else default

    def map(self, fn) -> "Result[T, E]":
        if self._is_ok:
            return Result.ok(fn(self._value))  # type: ignore[arg-type]
        return self
