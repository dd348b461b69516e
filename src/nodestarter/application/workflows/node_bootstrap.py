"""
Node startup sequence.

1. locate the keystore and, for a single key file, identify the operator
2. pick the orchestrator address (explicit config wins over the keystore)
3. sync on-chain registration into the local store (orchestrators only)
4. classify the advertised service URI as local or remote
5. parse the configured broadcaster price list
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from nodestarter.application.ports.chain_query_port import ChainQueryPort
from nodestarter.application.ports.orchestrator_store_port import OrchestratorStorePort
from nodestarter.application.workflows.orchestrator_sync import setup_orchestrator
from nodestarter.config.models import NodeStarterConfig
from nodestarter.core.di.container import Container
from nodestarter.domain.keystore import KeystoreInfo, resolve_keystore_path
from nodestarter.domain.network import is_local_url
from nodestarter.domain.orchestrator import OrchestratorRecord
from nodestarter.domain.pricing import BroadcasterPrice, parse_broadcaster_prices

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    keystore: Optional[KeystoreInfo] = None
    orchestrator_address: Optional[str] = None
    orchestrator: Optional[OrchestratorRecord] = None
    registration_error: Optional[Exception] = None
    service_uri_is_local: Optional[bool] = None
    broadcaster_prices: List[BroadcasterPrice] = field(default_factory=list)


def bootstrap_node(
    config: NodeStarterConfig,
    *,
    chain: Optional[ChainQueryPort] = None,
    store: Optional[OrchestratorStorePort] = None,
    container: Optional[Container] = None,
) -> BootstrapResult:
    """
    Run the startup sequence.

    ``chain`` and ``store`` default to whatever ``container`` (or the global
    container) has registered; they are only resolved when a sync is needed.
    Keystore and service URI errors propagate. A chain error propagates too,
    unless ``config.continue_without_registration`` is set.
    """
    result = BootstrapResult()

    if config.keystore.path:
        result.keystore = resolve_keystore_path(config.keystore.path)
        logger.info("Keystore resolved: path=%s address=%s", result.keystore.path, result.keystore.address)

    result.orchestrator_address = config.chain.orchestrator_address or (
        result.keystore.address if result.keystore is not None else None
    )

    if config.orchestrator:
        if result.orchestrator_address is None:
            logger.warning("No orchestrator address available; skipping registration sync")
        else:
            c = container or Container.instance()
            chain = chain or c.resolve(ChainQueryPort)
            store = store or c.resolve(OrchestratorStorePort)
            try:
                result.orchestrator = setup_orchestrator(chain, store, result.orchestrator_address)
            except Exception as exc:
                if not config.continue_without_registration:
                    raise
                logger.error("Continuing without registration data: %s", exc)
                result.registration_error = exc

    if config.network.service_uri:
        result.service_uri_is_local = is_local_url(
            config.network.service_uri,
            resolve=config.network.resolve_hostnames,
            timeout=config.network.resolve_timeout,
        )
        if result.service_uri_is_local:
            logger.warning("Service URI %s is local; remote peers will not reach it", config.network.service_uri)

    if config.pricing.broadcaster_prices:
        result.broadcaster_prices = parse_broadcaster_prices(config.pricing.broadcaster_prices)
        for price in result.broadcaster_prices:
            logger.info(
                "Price for broadcaster %s: %d wei per %d pixels",
                price.eth_address,
                price.price_per_unit,
                price.pixels_per_unit,
            )

    return result
