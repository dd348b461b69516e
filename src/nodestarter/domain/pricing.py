"""
Broadcaster price lists.

A counterpart advertises per-broadcaster prices as::

    {"broadcasters": [{"ethaddress": "0x...", "priceperunit": 1000, "pixelsperunit": 1}, ...]}

The value may be given inline or as a path to a file holding the document.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from nodestarter.core.errors import InvalidAddressError, PriceListParseError
from nodestarter.domain.address import normalize_address
from nodestarter.domain.orchestrator import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BroadcasterPrice:
    eth_address: str
    price_per_unit: int
    pixels_per_unit: int

    @property
    def price_per_pixel(self) -> Fraction:
        """Exact rate; raises ZeroDivisionError when pixels_per_unit is 0."""
        return Fraction(self.price_per_unit, self.pixels_per_unit)


class _PriceEntryModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ethaddress: StrictStr
    # both are int64 on the wire
    priceperunit: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX)
    pixelsperunit: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX)


class _PriceListModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    broadcasters: List[_PriceEntryModel] = Field(default_factory=list)


def parse_broadcaster_prices(document: str) -> List[BroadcasterPrice]:
    """
    Lenient parse: malformed input is logged and yields an empty list.

    Use :func:`parse_broadcaster_prices_strict` to get the error instead.
    """
    try:
        return parse_broadcaster_prices_strict(document)
    except PriceListParseError as exc:
        logger.error("broadcaster price list parsing error: %s", exc)
        return []


def parse_broadcaster_prices_strict(document: str) -> List[BroadcasterPrice]:
    if not document or not document.strip():
        return []

    text = _read_if_file(document)
    try:
        raw = json.loads(text)
    except ValueError as exc:
        raise PriceListParseError(message=f"invalid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise PriceListParseError(message="price list must be a JSON object")

    try:
        parsed = _PriceListModel.model_validate(_lower_keys(raw))
    except PydanticValidationError as exc:
        raise PriceListParseError(message=f"invalid price list: {exc}") from exc

    prices = []
    for i, entry in enumerate(parsed.broadcasters):
        try:
            address = normalize_address(entry.ethaddress)
        except InvalidAddressError as exc:
            raise PriceListParseError(
                message=f"broadcasters[{i}]: {exc}", context={"index": i}
            ) from exc
        prices.append(
            BroadcasterPrice(
                eth_address=address,
                price_per_unit=entry.priceperunit,
                pixels_per_unit=entry.pixelsperunit,
            )
        )
    return prices


def _read_if_file(value: str) -> str:
    try:
        path = Path(value).expanduser()
        if path.is_file():
            return path.read_text(encoding="utf-8")
    except (OSError, ValueError):
        # inline JSON is rarely a valid path (too long, NUL bytes, ...)
        pass
    return value


def _lower_keys(value: Any) -> Any:
    # JSON keys match case-insensitively: "EthAddress" == "ethaddress"
    if isinstance(value, dict):
        out: Dict[str, Any] = {}
        for k, v in value.items():
            out[str(k).lower()] = _lower_keys(v)
        return out
    if isinstance(value, list):
        return [_lower_keys(v) for v in value]
    return value
