# nodestarter/config/settings.py

import os
from typing import Any, Dict, Optional

from .models import NodeStarterConfig

_TRUE_VALUES = ("1", "true", "yes", "on")

# 环境变量 -> (配置段, 字段)
ENV_OVERRIDES = {
    "NODESTARTER_KEYSTORE_PATH": ("keystore", "path"),
    "NODESTARTER_ORCH_ADDR": ("chain", "orchestrator_address"),
    "NODESTARTER_CHAIN_CLIENT": ("chain", "client"),
    "NODESTARTER_SUBGRAPH_URL": ("chain", "subgraph_url"),
    "NODESTARTER_DB_URL": ("database", "url"),
    "NODESTARTER_SERVICE_ADDR": ("network", "service_uri"),
    "NODESTARTER_BROADCASTER_PRICES": ("pricing", "broadcaster_prices"),
    "NODESTARTER_LOG_LEVEL": ("logging", "level"),
}


def load_environment_variables(data: Dict[str, Any], environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """将环境变量覆盖到原始配置字典上（环境变量优先）。"""
    env = os.environ if environ is None else environ
    merged = {k: (dict(v) if isinstance(v, dict) else v) for k, v in (data or {}).items()}

    for var, (section, key) in ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            merged.setdefault(section, {})
            merged[section][key] = value

    orch = env.get("NODESTARTER_ORCHESTRATOR")
    if orch is not None:
        merged["orchestrator"] = orch.lower() in _TRUE_VALUES

    return merged


def create_config(config_path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> NodeStarterConfig:
    """创建配置实例：YAML 文件（可选）+ 环境变量覆盖。"""
    data: Dict[str, Any] = {}
    if config_path:
        data = NodeStarterConfig.from_yaml(config_path).model_dump(exclude_unset=True)
    return NodeStarterConfig(**load_environment_variables(data, environ))
