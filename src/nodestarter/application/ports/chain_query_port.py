from __future__ import annotations

from typing import Protocol, runtime_checkable

from nodestarter.domain.orchestrator import OrchestratorInfo


@runtime_checkable
class ChainQueryPort(Protocol):
    """
    Read-only view of on-chain registration state.

    Implementations raise on failure; callers propagate the exception as-is.
    """

    def get_orchestrator(self, address: str) -> OrchestratorInfo:
        """Fetch registration info for ``address``."""
