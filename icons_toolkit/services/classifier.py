"""Asset classification into crypto / crypto ETF / fiat currency buckets."""

from __future__ import annotations

from typing import Iterable, List

from icons_toolkit.schemas.binance import RawAsset
from icons_toolkit.schemas.repository import AssetCategory, ClassificationResult, ClassifiedAsset

ETF_NETWORK = "ETF"
LEVERAGED_TOKEN_PREFIXES = ("3X Long", "3X Short")
LEVERAGED_TOKEN_SUFFIX = "Token"
LEVERAGED_TOKEN_MIN_LENGTH = 13


def is_leveraged_token_name(name: str) -> bool:
    """FTX-style leveraged token names, e.g. ``3X Long Bitcoin Token``."""
    if len(name) <= LEVERAGED_TOKEN_MIN_LENGTH:
        return False
    return name.startswith(LEVERAGED_TOKEN_PREFIXES) and name.endswith(LEVERAGED_TOKEN_SUFFIX)


def is_etf(asset: RawAsset) -> bool:
    # Only the first network descriptor is consulted
    return asset.first_network == ETF_NETWORK or is_leveraged_token_name(asset.name)


def categorize(asset: RawAsset) -> AssetCategory:
    if asset.is_legal_money:
        return AssetCategory.FIAT_CURRENCY
    if is_etf(asset):
        return AssetCategory.CRYPTO_ETF
    return AssetCategory.CRYPTO


def classify_asset(asset: RawAsset) -> ClassifiedAsset:
    normalized = asset.model_copy(update={"coin": asset.coin.lower()})
    return ClassifiedAsset(asset=normalized, category=categorize(asset))


def classify_assets(assets: Iterable[RawAsset]) -> ClassificationResult:
    """Split ``assets`` into three disjoint lists, keeping input order per bucket."""
    result = ClassificationResult()
    for asset in assets:
        classified = classify_asset(asset)
        result.for_category(classified.category).append(classified.asset)
    return result


def sort_by_coin(assets: Iterable[RawAsset]) -> List[RawAsset]:
    """Stable ordinal sort by coin."""
    return sorted(assets, key=lambda asset: asset.coin)
