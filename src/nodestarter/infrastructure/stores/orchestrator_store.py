from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nodestarter.application.ports.orchestrator_store_port import OrchestratorStorePort
from nodestarter.domain.address import normalize_address
from nodestarter.domain.orchestrator import OrchestratorFilter, OrchestratorRecord
from nodestarter.infrastructure.stores.models import Base, OrchestratorModel
from nodestarter.infrastructure.stores.sqlalchemy_db import SessionProvider, get_db_url

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlAlchemyOrchestratorStore(OrchestratorStorePort):
    """
    Orchestrator records persisted via SQLAlchemy.

    - upsert_orchestrator(): insert, or update the row with the same address
    - select_orchestrators(): filter by addresses and/or active round
    """

    def __init__(self, db_url: Optional[str] = None, *, auto_create_schema: bool = True):
        self.db_url = db_url or get_db_url()
        self._provider = SessionProvider(self.db_url)
        # serializes upserts from this process; the unique constraint covers the rest
        self._write_lock = threading.Lock()
        if auto_create_schema:
            # Safety net for local dev/tests. In production, prefer Alembic migrations.
            Base.metadata.create_all(self._provider.engine)

    def upsert_orchestrator(self, record: OrchestratorRecord) -> OrchestratorRecord:
        address = normalize_address(record.address)
        now = _utcnow()
        with self._write_lock, self._provider.session() as session:
            row = self._find(session, address)
            if row is None:
                row = OrchestratorModel(ethereum_addr=address, created_at=now)
                self._apply(row, record, now)
                session.add(row)
                try:
                    session.flush()
                except IntegrityError:
                    # another writer inserted the same address first
                    session.rollback()
                    row = self._find(session, address)
                    if row is None:
                        raise
                    self._apply(row, record, now)
            else:
                self._apply(row, record, now)

            session.commit()
            session.refresh(row)
            return self._to_record(row)

    def select_orchestrators(self, filter: Optional[OrchestratorFilter] = None) -> List[OrchestratorRecord]:
        stmt = select(OrchestratorModel)
        if filter is not None:
            if filter.addresses:
                stmt = stmt.where(OrchestratorModel.ethereum_addr.in_(filter.normalized_addresses()))
            if filter.current_round is not None:
                stmt = stmt.where(
                    OrchestratorModel.activation_round <= filter.current_round,
                    OrchestratorModel.deactivation_round > filter.current_round,
                )
        stmt = stmt.order_by(OrchestratorModel.ethereum_addr)
        with self._provider.session() as session:
            rows = session.execute(stmt).scalars().all()
            return [self._to_record(r) for r in rows]

    def get_orchestrator(self, address: str) -> Optional[OrchestratorRecord]:
        with self._provider.session() as session:
            row = self._find(session, normalize_address(address))
            return self._to_record(row) if row else None

    def close(self) -> None:
        self._provider.dispose()

    @staticmethod
    def _find(session: Session, address: str) -> Optional[OrchestratorModel]:
        return session.execute(
            select(OrchestratorModel).where(OrchestratorModel.ethereum_addr == address)
        ).scalar_one_or_none()

    @staticmethod
    def _apply(row: OrchestratorModel, record: OrchestratorRecord, now: datetime) -> None:
        row.activation_round = record.activation_round
        row.deactivation_round = record.deactivation_round
        if record.service_uri:
            row.service_uri = record.service_uri
        row.updated_at = now

    @staticmethod
    def _to_record(row: OrchestratorModel) -> OrchestratorRecord:
        return OrchestratorRecord(
            address=row.ethereum_addr,
            activation_round=int(row.activation_round),
            deactivation_round=int(row.deactivation_round),
            service_uri=row.service_uri,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
