"""
Pydantic 配置模型，提供类型安全的启动配置（多余字段忽略）。
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from nodestarter.core.errors import InvalidAddressError
from nodestarter.domain.address import normalize_address

DEFAULT_DB_URL = "sqlite:///data/nodestarter.db"
DEFAULT_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/livepeer/arbitrum-one"


class KeystoreConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    path: Optional[str] = None


class ChainConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    client: Literal["stub", "subgraph"] = "subgraph"
    subgraph_url: str = DEFAULT_SUBGRAPH_URL
    timeout: float = Field(default=10.0, gt=0)
    orchestrator_address: Optional[str] = None
    # 仅 stub 客户端使用
    stub_activation_round: int = 0
    stub_deactivation_round: int = 0

    @field_validator("orchestrator_address")
    @classmethod
    def _normalize_orchestrator_address(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            return normalize_address(value)
        except InvalidAddressError as exc:
            raise ValueError(str(exc)) from exc


class DatabaseConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str = DEFAULT_DB_URL
    auto_create_schema: bool = True


class NetworkConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    service_uri: Optional[str] = None
    resolve_hostnames: bool = False
    resolve_timeout: float = Field(default=2.0, gt=0)


class PricingConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # 内联 JSON 或文件路径
    broadcaster_prices: Optional[str] = None


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: str = "INFO"


class NodeStarterConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    orchestrator: bool = False
    continue_without_registration: bool = False
    keystore: KeystoreConfig = Field(default_factory=KeystoreConfig)
    chain: ChainConfig = Field(default_factory=ChainConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "NodeStarterConfig":
        file_path = Path(path).expanduser()
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        return cls(**data)
