"""
链上注册信息查询：通过 GraphQL 子图读取编排者的激活/停用轮次。

子图中的 BigInt 字段以十进制字符串返回，这里转换为 Python int（任意精度），
截断到 64 位的策略由领域层负责。
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from loguru import logger

from nodestarter.application.ports.chain_query_port import ChainQueryPort
from nodestarter.config.models import DEFAULT_SUBGRAPH_URL
from nodestarter.core.errors import ChainQueryError, InvalidAddressError
from nodestarter.domain.address import normalize_address
from nodestarter.domain.orchestrator import OrchestratorInfo

TRANSCODER_QUERY = """
query Transcoder($id: ID!) {
  transcoder(id: $id) {
    id
    activationRound
    deactivationRound
    serviceURI
    totalStake
  }
}
"""


class SubgraphChainClient(ChainQueryPort):
    """编排者注册信息的网络查询客户端"""

    def __init__(
        self,
        url: str = DEFAULT_SUBGRAPH_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            url: 子图 GraphQL 端点
            timeout: 单次请求超时（秒）
            session: 可注入的 requests.Session（测试中替换）
        """
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()
        self._headers = {"Accept": "application/json", "Content-Type": "application/json"}

    def get_orchestrator(self, address: str) -> OrchestratorInfo:
        address = normalize_address(address)
        logger.debug(f"查询编排者注册信息: {address}")

        data = self._post({"query": TRANSCODER_QUERY, "variables": {"id": address}})
        payload = data.get("data") or {}
        if not isinstance(payload, dict):
            raise ChainQueryError(message="invalid subgraph response: data is not an object", context={"url": self.url})
        transcoder = payload.get("transcoder")
        if not transcoder:
            raise ChainQueryError(
                message=f"orchestrator {address} not registered",
                context={"address": address},
            )
        if not isinstance(transcoder, dict):
            raise ChainQueryError(
                message=f"malformed transcoder record for {address}: not an object",
                context={"address": address},
            )
        return self._parse_transcoder(address, transcoder)

    def close(self) -> None:
        self._session.close()

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self._session.post(self.url, json=payload, headers=self._headers, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"子图请求失败: {self.url} - {e}")
            raise ChainQueryError(message=f"subgraph request failed: {e}", context={"url": self.url}) from e
        except ValueError as e:
            logger.error(f"子图响应不是合法 JSON: {self.url} - {e}")
            raise ChainQueryError(message=f"invalid subgraph response: {e}", context={"url": self.url}) from e

        if not isinstance(data, dict):
            raise ChainQueryError(message="invalid subgraph response: not an object", context={"url": self.url})
        errors = data.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            first = errors[0].get("message") if isinstance(errors[0], dict) else str(errors[0])
            logger.error(f"子图返回错误: {first}")
            raise ChainQueryError(message=f"subgraph error: {first}", context={"url": self.url})
        return data

    def _parse_transcoder(self, address: str, data: Dict[str, Any]) -> OrchestratorInfo:
        try:
            return OrchestratorInfo(
                address=normalize_address(data.get("id") or address),
                activation_round=_big_int(data.get("activationRound")),
                deactivation_round=_big_int(data.get("deactivationRound")),
                service_uri=data.get("serviceURI") or None,
                total_stake=_decimal_wei(data.get("totalStake")),
            )
        except (TypeError, ValueError, InvalidAddressError) as e:
            raise ChainQueryError(
                message=f"malformed transcoder record for {address}: {e}",
                context={"address": address},
            ) from e


def _big_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError("boolean is not a round number")
    return int(value)


def _decimal_wei(value: Any) -> Optional[int]:
    # totalStake 以带小数的 LPT 字符串返回，按 1e18 换算为最小单位
    if value is None:
        return None
    text = str(value).strip()
    negative = text.startswith("-")
    whole, _, frac = text.lstrip("+-").partition(".")
    frac = (frac + "0" * 18)[:18]
    amount = int(whole or "0") * 10**18 + int(frac)
    return -amount if negative else amount
