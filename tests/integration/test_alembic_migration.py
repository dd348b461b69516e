from __future__ import annotations

from pathlib import Path

import sqlalchemy as sa
from alembic import command
from alembic.config import Config

from nodestarter.domain.orchestrator import OrchestratorRecord
from nodestarter.infrastructure.stores import SqlAlchemyOrchestratorStore

REPO_ROOT = Path(__file__).resolve().parents[2]


def _alembic_config(db_url: str) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(REPO_ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


def test_upgrade_creates_orchestrators_table(sqlite_url):
    command.upgrade(_alembic_config(sqlite_url), "head")

    engine = sa.create_engine(sqlite_url)
    try:
        insp = sa.inspect(engine)
        assert insp.has_table("orchestrators")
        cols = {c["name"] for c in insp.get_columns("orchestrators")}
        assert {"ethereum_addr", "activation_round", "deactivation_round", "service_uri"} <= cols
        assert "ix_orchestrators_ethereum_addr" in {i["name"] for i in insp.get_indexes("orchestrators")}
    finally:
        engine.dispose()

    # the migrated schema is usable without create_all()
    store = SqlAlchemyOrchestratorStore(db_url=sqlite_url, auto_create_schema=False)
    try:
        store.upsert_orchestrator(OrchestratorRecord(address="0x" + "1" * 40, activation_round=1, deactivation_round=2))
        assert len(store.select_orchestrators()) == 1
    finally:
        store.close()


def test_upgrade_tolerates_existing_schema(sqlite_url):
    SqlAlchemyOrchestratorStore(db_url=sqlite_url, auto_create_schema=True).close()
    command.upgrade(_alembic_config(sqlite_url), "head")
    command.downgrade(_alembic_config(sqlite_url), "base")

    engine = sa.create_engine(sqlite_url)
    try:
        assert not sa.inspect(engine).has_table("orchestrators")
    finally:
        engine.dispose()
