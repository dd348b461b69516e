from __future__ import annotations

from typing import List, Optional

from nodestarter.application.ports.chain_query_port import ChainQueryPort
from nodestarter.domain.orchestrator import OrchestratorInfo


class StubChainClient(ChainQueryPort):
    """
    Deterministic chain client.

    Returns ``orchestrator`` for every query, or raises ``error`` when set.
    The error object is raised as-is so callers can assert on identity.
    """

    def __init__(self, orchestrator: Optional[OrchestratorInfo] = None, error: Optional[BaseException] = None):
        self.orchestrator = orchestrator
        self.error = error
        self.calls: List[str] = []

    def get_orchestrator(self, address: str) -> OrchestratorInfo:
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        if self.orchestrator is None:
            # an unregistered address reads back as all-zero rounds on chain
            return OrchestratorInfo(address=address, activation_round=0, deactivation_round=0)
        return self.orchestrator
