"""
Reconcile on-chain orchestrator registration into the local store.
"""

from __future__ import annotations

import logging

from nodestarter.application.ports.chain_query_port import ChainQueryPort
from nodestarter.application.ports.orchestrator_store_port import OrchestratorStorePort
from nodestarter.core.di.container import inject
from nodestarter.domain.address import normalize_address
from nodestarter.domain.orchestrator import OrchestratorRecord

logger = logging.getLogger(__name__)


def setup_orchestrator(chain: ChainQueryPort, store: OrchestratorStorePort, address: str) -> OrchestratorRecord:
    """
    Fetch ``address``'s registration from ``chain`` and upsert it into ``store``.

    The record is keyed by the requested address, whatever the chain client
    reports. Errors raised by ``chain`` propagate unchanged; the store is not
    touched.
    """
    address = normalize_address(address)
    info = chain.get_orchestrator(address)

    if info.address.lower().removeprefix("0x") != address[2:]:
        logger.warning("Chain client returned %s for orchestrator %s; keeping the requested address", info.address, address)
    if info.total_stake is not None:
        logger.debug("Orchestrator %s total stake: %d wei", address, info.total_stake)

    record = OrchestratorRecord.from_info(info, address=address)
    stored = store.upsert_orchestrator(record)
    logger.info(
        "Synced orchestrator %s activation_round=%d deactivation_round=%d",
        stored.address,
        stored.activation_round,
        stored.deactivation_round,
    )
    return stored


@inject(ChainQueryPort, OrchestratorStorePort)
class OrchestratorSync:
    """Bound form of :func:`setup_orchestrator` for use with the DI container."""

    def __init__(self, chain_query: ChainQueryPort = None, orchestrator_store: OrchestratorStorePort = None):
        if chain_query is None or orchestrator_store is None:
            raise ValueError("OrchestratorSync needs a chain client and an orchestrator store")
        self.chain = chain_query
        self.store = orchestrator_store

    def run(self, address: str) -> OrchestratorRecord:
        return setup_orchestrator(self.chain, self.store, address)
