"""
Orchestrator registration records.

The chain reports rounds as arbitrary-precision integers; local storage keeps
them as signed 64-bit values. Rounds above the int64 range saturate to
``INT64_MAX`` because the protocol marks "never deactivates" with the largest
uint256, and saturation keeps that meaning. Negative rounds are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from nodestarter.core.errors import RoundConversionError
from nodestarter.domain.address import normalize_address

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


@dataclass(frozen=True)
class OrchestratorInfo:
    """Registration state as reported by a chain client."""

    address: str
    activation_round: int
    deactivation_round: int
    service_uri: Optional[str] = None
    total_stake: Optional[int] = None


@dataclass
class OrchestratorRecord:
    """Locally persisted registration state, keyed by address."""

    address: str
    activation_round: int
    deactivation_round: int
    service_uri: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_active(self, current_round: int) -> bool:
        return self.activation_round <= current_round < self.deactivation_round

    @classmethod
    def from_info(cls, info: OrchestratorInfo, address: Optional[str] = None) -> "OrchestratorRecord":
        """``address`` overrides the address the chain client reported."""
        return cls(
            address=normalize_address(address or info.address),
            activation_round=to_round(info.activation_round, field_name="activation_round"),
            deactivation_round=to_round(info.deactivation_round, field_name="deactivation_round"),
            service_uri=info.service_uri,
        )


@dataclass
class OrchestratorFilter:
    addresses: List[str] = field(default_factory=list)
    current_round: Optional[int] = None

    def normalized_addresses(self) -> List[str]:
        return [normalize_address(a) for a in self.addresses]


def to_round(value: int, *, field_name: str = "round") -> int:
    if value < 0:
        raise RoundConversionError(
            message=f"{field_name} must not be negative, got {value}",
            context={"field": field_name, "value": str(value)},
        )
    if value > INT64_MAX:
        return INT64_MAX
    return int(value)
