from __future__ import annotations

import pytest

from nodestarter.domain.orchestrator import OrchestratorFilter, OrchestratorRecord
from nodestarter.infrastructure.stores import InMemoryOrchestratorStore, SqlAlchemyOrchestratorStore

A = "0x" + "aa" * 20
B = "0x" + "bb" * 20
C = "0x" + "cc" * 20


@pytest.fixture(params=["sqlalchemy", "memory"])
def store(request, sqlite_url):
    if request.param == "sqlalchemy":
        s = SqlAlchemyOrchestratorStore(db_url=sqlite_url, auto_create_schema=True)
    else:
        s = InMemoryOrchestratorStore()
    yield s
    s.close()


def test_upsert_inserts_then_updates(store):
    first = store.upsert_orchestrator(OrchestratorRecord(address=A, activation_round=5, deactivation_round=10))
    assert first.created_at is not None

    second = store.upsert_orchestrator(
        OrchestratorRecord(address=A.upper().replace("0X", "0x"), activation_round=6, deactivation_round=12)
    )

    rows = store.select_orchestrators(OrchestratorFilter(addresses=[A]))
    assert len(rows) == 1
    assert (rows[0].activation_round, rows[0].deactivation_round) == (6, 12)
    assert second.created_at == first.created_at


def test_upsert_keeps_service_uri_when_not_reported(store):
    store.upsert_orchestrator(
        OrchestratorRecord(address=A, activation_round=1, deactivation_round=2, service_uri="https://a:8935")
    )
    store.upsert_orchestrator(OrchestratorRecord(address=A, activation_round=1, deactivation_round=3))
    assert store.get_orchestrator(A).service_uri == "https://a:8935"


def test_select_filters_by_address_and_round(store):
    store.upsert_orchestrator(OrchestratorRecord(address=A, activation_round=5, deactivation_round=10))
    store.upsert_orchestrator(OrchestratorRecord(address=B, activation_round=1, deactivation_round=5))
    store.upsert_orchestrator(OrchestratorRecord(address=C, activation_round=8, deactivation_round=20))

    assert [r.address for r in store.select_orchestrators()] == [A, B, C]
    assert [r.address for r in store.select_orchestrators(OrchestratorFilter(addresses=[C, A]))] == [A, C]
    assert [r.address for r in store.select_orchestrators(OrchestratorFilter(current_round=5))] == [A]
    assert [r.address for r in store.select_orchestrators(OrchestratorFilter(current_round=9))] == [A, C]
    assert store.select_orchestrators(OrchestratorFilter(addresses=[B], current_round=9)) == []


def test_get_orchestrator_missing(store):
    assert store.get_orchestrator(A) is None


def test_rows_survive_a_new_store_instance(sqlite_url):
    s1 = SqlAlchemyOrchestratorStore(db_url=sqlite_url)
    s1.upsert_orchestrator(OrchestratorRecord(address=A, activation_round=2**63 - 1, deactivation_round=2**63 - 1))
    s1.close()

    s2 = SqlAlchemyOrchestratorStore(db_url=sqlite_url)
    try:
        row = s2.get_orchestrator(A)
        assert row.activation_round == 2**63 - 1
    finally:
        s2.close()
