from icons_toolkit.schemas.binance import NetworkDescriptor, RawAsset, Restrictions
from icons_toolkit.schemas.repository import (
    CATEGORIES,
    AssetCategory,
    ClassificationResult,
    ClassifiedAsset,
    Manifest,
    MarkdownTables,
    RepositoryAsset,
    TodoReport,
)

__all__ = [
    "CATEGORIES",
    "AssetCategory",
    "ClassificationResult",
    "ClassifiedAsset",
    "Manifest",
    "MarkdownTables",
    "NetworkDescriptor",
    "RawAsset",
    "RepositoryAsset",
    "Restrictions",
    "TodoReport",
]
