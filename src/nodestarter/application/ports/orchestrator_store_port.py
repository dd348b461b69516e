from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from nodestarter.domain.orchestrator import OrchestratorFilter, OrchestratorRecord


@runtime_checkable
class OrchestratorStorePort(Protocol):
    """
    Persistent orchestrator records, unique by address.

    Writes to the same address must be serialized by the implementation.
    """

    def upsert_orchestrator(self, record: OrchestratorRecord) -> OrchestratorRecord:
        """Insert or update the record for ``record.address``; returns the stored row."""

    def select_orchestrators(self, filter: Optional[OrchestratorFilter] = None) -> List[OrchestratorRecord]:
        """Records matching ``filter`` (all records when omitted), ordered by address."""

    def get_orchestrator(self, address: str) -> Optional[OrchestratorRecord]:
        """The record for ``address`` or None."""

    def close(self) -> None:
        """Release underlying resources (optional)."""
