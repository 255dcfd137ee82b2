"""Icon repository schemas: categories, manifest, rendered artifacts."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from icons_toolkit.schemas.binance import RawAsset


class AssetCategory(str, Enum):
    CRYPTO = "Crypto"
    CRYPTO_ETF = "CryptoETF"
    FIAT_CURRENCY = "FiatCurrency"

    @property
    def key(self) -> str:
        """Manifest key, icon directory name and intermediate JSON file stem."""
        return _CATEGORY_KEYS[self]

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def url_segment(self) -> str:
        """Path segment of the published icon URL.

        ETF icons are released into ``crypto/`` so their URLs use it too.
        """
        return "currency" if self is AssetCategory.FIAT_CURRENCY else "crypto"

    @property
    def id_prefix_from_symbol(self) -> bool:
        return self is AssetCategory.CRYPTO


_CATEGORY_KEYS = {
    AssetCategory.CRYPTO: "crypto",
    AssetCategory.CRYPTO_ETF: "etf",
    AssetCategory.FIAT_CURRENCY: "currency",
}

_CATEGORY_LABELS = {
    AssetCategory.CRYPTO: "Crypto",
    AssetCategory.CRYPTO_ETF: "ETFs",
    AssetCategory.FIAT_CURRENCY: "Currencies",
}

CATEGORIES: List[AssetCategory] = [
    AssetCategory.CRYPTO,
    AssetCategory.CRYPTO_ETF,
    AssetCategory.FIAT_CURRENCY,
]


class ClassifiedAsset(BaseModel):
    """A raw asset with its coin lowercased and exactly one category."""

    model_config = ConfigDict(frozen=True)

    asset: RawAsset
    category: AssetCategory

    @property
    def coin(self) -> str:
        return self.asset.coin

    @property
    def name(self) -> str:
        return self.asset.name


class ClassificationResult(BaseModel):
    crypto: List[RawAsset] = Field(default_factory=list)
    etf: List[RawAsset] = Field(default_factory=list)
    currency: List[RawAsset] = Field(default_factory=list)

    def for_category(self, category: AssetCategory) -> List[RawAsset]:
        return getattr(self, category.key)

    @property
    def non_fiat(self) -> List[RawAsset]:
        return [*self.crypto, *self.etf]

    def counts(self) -> Dict[str, int]:
        return {category.key: len(self.for_category(category)) for category in CATEGORIES}


class RepositoryAsset(BaseModel):
    """Published manifest record."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str = ""


class Manifest(BaseModel):
    crypto: List[RepositoryAsset] = Field(default_factory=list)
    etf: List[RepositoryAsset] = Field(default_factory=list)
    currency: List[RepositoryAsset] = Field(default_factory=list)

    def for_category(self, category: AssetCategory) -> List[RepositoryAsset]:
        return getattr(self, category.key)

    def symbols(self, category: AssetCategory) -> set[str]:
        return {asset.symbol for asset in self.for_category(category)}


class CategoryTable(BaseModel):
    count: int
    table: str


class MarkdownTables(BaseModel):
    crypto: CategoryTable
    etf: CategoryTable
    currency: CategoryTable

    def placeholders(self) -> Dict[str, str]:
        """Template placeholder -> replacement text."""
        return {
            "{{ previewCryptoCount }}": str(self.crypto.count),
            "{{ previewCryptoTable }}": self.crypto.table,
            "{{ previewEtfCount }}": str(self.etf.count),
            "{{ previewEtfTable }}": self.etf.table,
            "{{ previewCurrencyCount }}": str(self.currency.count),
            "{{ previewCurrencyTable }}": self.currency.table,
        }


class TodoReport(BaseModel):
    """Assets of one category that have no published icon yet."""

    category: AssetCategory
    missing: List[RawAsset] = Field(default_factory=list)
    total: int = 0

    @property
    def displayed(self) -> int:
        return len(self.missing)

    @property
    def nothing_to_do(self) -> bool:
        return not self.missing
