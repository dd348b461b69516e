"""
领域层：地址、密钥库定位、端点分类、价格表与编排者注册记录。
"""

from .address import ZERO_ADDRESS, is_hex_address, normalize_address
from .keystore import KeystoreAddress, KeystoreDirectory, KeystoreInfo, resolve_keystore_path
from .network import is_local_host, is_local_url
from .orchestrator import INT64_MAX, OrchestratorFilter, OrchestratorInfo, OrchestratorRecord, to_round
from .pricing import BroadcasterPrice, parse_broadcaster_prices, parse_broadcaster_prices_strict

__all__ = [
    "ZERO_ADDRESS",
    "is_hex_address",
    "normalize_address",
    "KeystoreAddress",
    "KeystoreDirectory",
    "KeystoreInfo",
    "resolve_keystore_path",
    "is_local_host",
    "is_local_url",
    "INT64_MAX",
    "OrchestratorFilter",
    "OrchestratorInfo",
    "OrchestratorRecord",
    "to_round",
    "BroadcasterPrice",
    "parse_broadcaster_prices",
    "parse_broadcaster_prices_strict",
]
