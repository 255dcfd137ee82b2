"""Coin -> display name index used to backfill empty manifest names."""

from __future__ import annotations

from typing import Dict, Iterable

from icons_toolkit.schemas.binance import RawAsset
from icons_toolkit.services.classifier import sort_by_coin


def build_name_index(assets: Iterable[RawAsset]) -> Dict[str, str]:
    """Map lowercase coin to name for non-fiat assets.

    The list is sorted by coin first; on duplicate coins the later entry
    overwrites the earlier one.
    """
    index: Dict[str, str] = {}
    entries = [asset for asset in assets if not asset.is_legal_money]
    for asset in sort_by_coin(a.model_copy(update={"coin": a.coin.lower()}) for a in entries):
        index[asset.coin] = asset.name
    return index
