"""
依赖装配：根据配置注册链查询客户端与编排者存储。
"""

from __future__ import annotations

from typing import Optional

from .container import Container


def bootstrap_dependencies(config=None, container: Optional[Container] = None) -> Container:
    """
    注册默认实现。

    - ChainQueryPort: ``chain.client`` 为 ``stub`` 时使用 StubChainClient，否则 SubgraphChainClient
    - OrchestratorStorePort: SqlAlchemyOrchestratorStore（单例）
    """
    # 延迟导入以避免循环依赖
    from nodestarter.application.ports import ChainQueryPort, OrchestratorStorePort
    from nodestarter.config import NodeStarterConfig
    from nodestarter.domain.orchestrator import OrchestratorInfo
    from nodestarter.infrastructure.chain import StubChainClient, SubgraphChainClient
    from nodestarter.infrastructure.stores import SqlAlchemyOrchestratorStore

    cfg = config or NodeStarterConfig()
    c = container or Container.instance()

    chain_cfg = cfg.chain
    if chain_cfg.client == "stub":
        stub_orch = None
        if chain_cfg.orchestrator_address:
            stub_orch = OrchestratorInfo(
                address=chain_cfg.orchestrator_address,
                activation_round=chain_cfg.stub_activation_round,
                deactivation_round=chain_cfg.stub_deactivation_round,
            )
        c.register(ChainQueryPort, lambda: StubChainClient(orchestrator=stub_orch), singleton=True)
    else:
        c.register(
            ChainQueryPort,
            lambda: SubgraphChainClient(url=chain_cfg.subgraph_url, timeout=chain_cfg.timeout),
            singleton=True,
        )

    db_cfg = cfg.database
    c.register(
        OrchestratorStorePort,
        lambda: SqlAlchemyOrchestratorStore(db_cfg.url, auto_create_schema=db_cfg.auto_create_schema),
        singleton=True,
    )
    return c
