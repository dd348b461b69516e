from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from nodestarter.core.errors import ChainQueryError
from nodestarter.domain.orchestrator import INT64_MAX, OrchestratorRecord
from nodestarter.infrastructure.chain import SubgraphChainClient

ADDR = "0x" + "ab" * 20
MAX_UINT256 = str(2**256 - 1)


class _FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> Any:
        if self._text is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class _FakeSession:
    def __init__(self, response: Optional[_FakeResponse] = None, exc: Optional[Exception] = None):
        self.response = response
        self.exc = exc
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url, json=None, headers=None, timeout=None):
        self.requests.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        self.closed = True


def _client(session: _FakeSession) -> SubgraphChainClient:
    return SubgraphChainClient(url="http://graph.local/subgraphs/name/lp", timeout=3.0, session=session)


def test_get_orchestrator_parses_big_ints():
    session = _FakeSession(
        _FakeResponse(
            payload={
                "data": {
                    "transcoder": {
                        "id": ADDR,
                        "activationRound": "2466",
                        "deactivationRound": MAX_UINT256,
                        "serviceURI": "https://orch.example:8935",
                        "totalStake": "1234.5",
                    }
                }
            }
        )
    )
    info = _client(session).get_orchestrator(ADDR.upper().replace("0X", "0x"))

    assert info.address == ADDR
    assert info.activation_round == 2466
    assert info.deactivation_round == 2**256 - 1
    assert info.service_uri == "https://orch.example:8935"
    assert info.total_stake == 1234 * 10**18 + 5 * 10**17
    assert OrchestratorRecord.from_info(info).deactivation_round == INT64_MAX

    sent = session.requests[0]
    assert sent["url"] == "http://graph.local/subgraphs/name/lp"
    assert sent["json"]["variables"] == {"id": ADDR}
    assert sent["timeout"] == 3.0


def test_unregistered_orchestrator_raises():
    session = _FakeSession(_FakeResponse(payload={"data": {"transcoder": None}}))
    with pytest.raises(ChainQueryError, match="not registered"):
        _client(session).get_orchestrator(ADDR)


def test_graphql_errors_raise():
    session = _FakeSession(_FakeResponse(payload={"errors": [{"message": "indexer unavailable"}]}))
    with pytest.raises(ChainQueryError, match="indexer unavailable"):
        _client(session).get_orchestrator(ADDR)


def test_http_errors_raise():
    session = _FakeSession(_FakeResponse(status_code=502, payload={}))
    with pytest.raises(ChainQueryError) as exc_info:
        _client(session).get_orchestrator(ADDR)
    assert isinstance(exc_info.value.__cause__, requests.HTTPError)


def test_connection_errors_raise():
    session = _FakeSession(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(ChainQueryError, match="connection refused"):
        _client(session).get_orchestrator(ADDR)


def test_non_json_response_raises():
    session = _FakeSession(_FakeResponse(text="<html>bad gateway</html>"))
    with pytest.raises(ChainQueryError, match="invalid subgraph response"):
        _client(session).get_orchestrator(ADDR)


def test_malformed_round_raises():
    session = _FakeSession(
        _FakeResponse(payload={"data": {"transcoder": {"id": ADDR, "activationRound": "soon", "deactivationRound": "0"}}})
    )
    with pytest.raises(ChainQueryError, match="malformed transcoder record"):
        _client(session).get_orchestrator(ADDR)


def test_close_closes_session():
    session = _FakeSession()
    _client(session).close()
    assert session.closed is True


def test_graphql_errors_object_raises():
    session = _FakeSession(_FakeResponse(payload={"errors": {"message": "boom"}}))
    with pytest.raises(ChainQueryError, match="boom"):
        _client(session).get_orchestrator(ADDR)


def test_non_object_data_raises():
    session = _FakeSession(_FakeResponse(payload={"data": [{"transcoder": None}]}))
    with pytest.raises(ChainQueryError, match="data is not an object"):
        _client(session).get_orchestrator(ADDR)


def test_non_object_transcoder_raises():
    session = _FakeSession(_FakeResponse(payload={"data": {"transcoder": ["2466", "0"]}}))
    with pytest.raises(ChainQueryError, match="malformed transcoder record"):
        _client(session).get_orchestrator(ADDR)


def test_invalid_transcoder_id_raises():
    session = _FakeSession(
        _FakeResponse(payload={"data": {"transcoder": {"id": "0x1234", "activationRound": "1", "deactivationRound": "2"}}})
    )
    with pytest.raises(ChainQueryError, match="malformed transcoder record"):
        _client(session).get_orchestrator(ADDR)


@pytest.mark.parametrize(
    "stake,expected",
    [
        ("1234.5", 1234 * 10**18 + 5 * 10**17),
        ("-1.5", -(15 * 10**17)),
        ("-0.25", -(25 * 10**16)),
        ("7", 7 * 10**18),
        (None, None),
    ],
)
def test_total_stake_converted_to_wei(stake, expected):
    session = _FakeSession(
        _FakeResponse(
            payload={"data": {"transcoder": {"id": ADDR, "activationRound": "1", "deactivationRound": "2", "totalStake": stake}}}
        )
    )
    assert _client(session).get_orchestrator(ADDR).total_stake == expected
