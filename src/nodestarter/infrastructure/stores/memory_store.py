from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from nodestarter.application.ports.orchestrator_store_port import OrchestratorStorePort
from nodestarter.domain.address import normalize_address
from nodestarter.domain.orchestrator import OrchestratorFilter, OrchestratorRecord


class InMemoryOrchestratorStore(OrchestratorStorePort):
    """Dict-backed orchestrator store (useful for tests and dry runs)."""

    def __init__(self) -> None:
        self._records: Dict[str, OrchestratorRecord] = {}
        self._lock = threading.Lock()

    def upsert_orchestrator(self, record: OrchestratorRecord) -> OrchestratorRecord:
        address = normalize_address(record.address)
        now = datetime.now(timezone.utc)
        with self._lock:
            existing = self._records.get(address)
            stored = replace(
                record,
                address=address,
                service_uri=record.service_uri or (existing.service_uri if existing else None),
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            self._records[address] = stored
            return replace(stored)

    def select_orchestrators(self, filter: Optional[OrchestratorFilter] = None) -> List[OrchestratorRecord]:
        with self._lock:
            records = list(self._records.values())
        if filter is not None:
            if filter.addresses:
                wanted = set(filter.normalized_addresses())
                records = [r for r in records if r.address in wanted]
            if filter.current_round is not None:
                records = [r for r in records if r.is_active(filter.current_round)]
        return [replace(r) for r in sorted(records, key=lambda r: r.address)]

    def get_orchestrator(self, address: str) -> Optional[OrchestratorRecord]:
        with self._lock:
            record = self._records.get(normalize_address(address))
        return replace(record) if record else None

    def close(self) -> None:
        return None
