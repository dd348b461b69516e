from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class OrchestratorModel(Base):
    """On-chain orchestrator registration mirrored locally."""
    __tablename__ = "orchestrators"
    __table_args__ = (UniqueConstraint("ethereum_addr", name="uq_orchestrators_ethereum_addr"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ethereum_addr: Mapped[str] = mapped_column(String(42), index=True)  # 0x + 40 hex, lowercase

    activation_round: Mapped[int] = mapped_column(BigInteger, default=0)
    deactivation_round: Mapped[int] = mapped_column(BigInteger, default=0)
    service_uri: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
