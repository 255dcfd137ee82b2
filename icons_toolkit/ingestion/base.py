"""Abstract source interface and ingestion-boundary validation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from icons_toolkit.core.logging import get_logger
from icons_toolkit.schemas.binance import RawAsset

log = get_logger("ingestion")


class BaseSource(ABC):
    """Abstract base class for asset sources."""

    name: str
    # Records exactly as received by the last fetch(), before validation
    last_payload: List[Any] = []

    @abstractmethod
    async def fetch(self) -> List[RawAsset]:
        """Fetch validated asset records."""


def _best_effort(record: Dict[str, Any]) -> RawAsset:
    """Rebuild a record from whichever of coin/name/isLegalMoney validate on their own."""
    fields: Dict[str, Any] = {}
    for key in ("coin", "name", "isLegalMoney"):
        if key not in record:
            continue
        try:
            RawAsset.model_validate({key: record[key]})
        except ValidationError:
            continue
        fields[key] = record[key]
    return RawAsset.model_validate(fields)


def parse_raw_assets(records: Iterable[Any], origin: str = "payload") -> List[RawAsset]:
    """Validate raw records into ``RawAsset`` models.

    Records without a ``coin`` are kept (with an empty coin) and flagged so
    they still show up in counts; records whose other fields are malformed
    keep the fields that validate. Records that are not objects at all are
    rejected with a warning.
    """
    assets: List[RawAsset] = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            log.warning(f"{origin}[{position}]: rejected non-object record {record!r}")
            continue
        try:
            asset = RawAsset.model_validate(record)
        except ValidationError as exc:
            log.warning(f"{origin}[{position}]: malformed record ({exc.errors()[0]['msg']}), keeping usable fields")
            asset = _best_effort(record)
        if not asset.coin:
            log.warning(f"{origin}[{position}]: record without coin (name={asset.name!r}), classifying best-effort")
        assets.append(asset)
    return assets
