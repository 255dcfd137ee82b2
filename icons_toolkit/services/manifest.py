"""Manifest reconciliation: merge freshly fetched assets into the published manifest.

The merge is additive and idempotent:

1. fetched assets without an icon on disk are dropped;
2. empty names are backfilled from the name index;
3. the result is appended to the published category list;
4. duplicates are removed by symbol, first occurrence wins (published entries
   come first, so they win);
5. the list is sorted by symbol.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Dict, Iterable, List, Mapping

from pydantic import ValidationError

from icons_toolkit.core.exceptions import ManifestError, MissingDependencyError
from icons_toolkit.core.files import read_json, write_json
from icons_toolkit.core.logging import get_logger
from icons_toolkit.ingestion.base import parse_raw_assets
from icons_toolkit.schemas.binance import RawAsset
from icons_toolkit.schemas.repository import CATEGORIES, AssetCategory, Manifest, RepositoryAsset
from icons_toolkit.services.presence import DEFAULT_CONCURRENCY, filter_present

log = get_logger("manifest")

MANIFEST_FILE = "manifest.json"
READABLE_MANIFEST_FILE = "manifest.readable.json"
NAMES_FILE = "cryptoNames.json"


# -------------------------------------------------------------------------
# Pure merge logic
# -------------------------------------------------------------------------
def unique_symbols(assets: Iterable[RepositoryAsset]) -> List[RepositoryAsset]:
    """Drop later duplicates of a symbol, keeping list order."""
    seen: set[str] = set()
    unique: List[RepositoryAsset] = []
    for asset in assets:
        if asset.symbol in seen:
            continue
        seen.add(asset.symbol)
        unique.append(asset)
    return unique


def sort_by_symbol(assets: Iterable[RepositoryAsset]) -> List[RepositoryAsset]:
    return sorted(assets, key=lambda asset: asset.symbol)


def to_repository_asset(asset: RawAsset, names: Mapping[str, str]) -> RepositoryAsset:
    coin = asset.coin.lower()
    name = asset.name
    if name == "" and coin in names:
        name = names[coin]
    return RepositoryAsset(symbol=coin, name=name)


def merge_category(
    published: Iterable[RepositoryAsset],
    fetched: Iterable[RawAsset],
    names: Mapping[str, str],
) -> List[RepositoryAsset]:
    merged = list(published)
    merged.extend(to_repository_asset(asset, names) for asset in fetched)
    return sort_by_symbol(unique_symbols(merged))


def merge_manifest(
    published: Manifest,
    fetched: Mapping[AssetCategory, Iterable[RawAsset]],
    names: Mapping[str, str],
) -> Manifest:
    """Merge each category independently. ``fetched`` must already be icon-filtered."""
    return Manifest(
        **{
            category.key: merge_category(published.for_category(category), fetched.get(category, []), names)
            for category in CATEGORIES
        }
    )


def manifest_to_payload(manifest: Manifest) -> dict:
    return manifest.model_dump(mode="json")


def parse_manifest(payload: object, origin: str) -> Manifest:
    try:
        return Manifest.model_validate(payload)
    except ValidationError as exc:
        raise ManifestError(f"Malformed manifest {origin}: {exc}") from exc


def read_manifest(path: Path, hint: str) -> Manifest:
    """Load a manifest file; absence is a missing prior stage, not an empty manifest."""
    if not path.is_file():
        raise MissingDependencyError(f"Manifest file {path}", hint)
    try:
        payload = read_json(path)
    except (OSError, json.JSONDecodeError) as exc:
        raise ManifestError(f"Failed to read manifest {path}: {exc}") from exc
    return parse_manifest(payload, str(path))


# -------------------------------------------------------------------------
# File-backed service
# -------------------------------------------------------------------------
class ManifestService:
    """Reads the published manifest and intermediate files, writes the new manifest.

    Read-merge-write runs under a lock so nothing in this process reads the
    generated manifest while it is being rebuilt.
    """

    def __init__(
        self,
        published_path: Path,
        generated_dir: Path,
        concurrency: int = DEFAULT_CONCURRENCY,
    ):
        self.published_path = Path(published_path)
        self.generated_dir = Path(generated_dir)
        self.concurrency = concurrency
        self._lock = asyncio.Lock()

    @property
    def manifest_path(self) -> Path:
        return self.generated_dir / MANIFEST_FILE

    @property
    def readable_manifest_path(self) -> Path:
        return self.generated_dir / READABLE_MANIFEST_FILE

    def load_published(self) -> Manifest:
        return read_manifest(self.published_path, "clone")

    def load_names(self) -> Dict[str, str]:
        path = self.generated_dir / NAMES_FILE
        if not path.is_file():
            raise MissingDependencyError(f"Names file {path}", "fetch")
        try:
            data = read_json(path)
        except (OSError, json.JSONDecodeError) as exc:
            raise ManifestError(f"Failed to read names file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestError(f"Names file {path} must contain a JSON object")
        return {str(coin): str(name) for coin, name in data.items()}

    def load_fetched(self, category: AssetCategory) -> List[RawAsset]:
        path = self.generated_dir / f"{category.key}.json"
        if not path.is_file():
            raise MissingDependencyError(f"Assets file {path}", "fetch")
        try:
            data = read_json(path)
        except (OSError, json.JSONDecodeError) as exc:
            raise ManifestError(f"Failed to read assets file {path}: {exc}") from exc
        if not isinstance(data, list):
            raise ManifestError(f"Assets file {path} must contain a JSON array")
        return parse_raw_assets(data, origin=path.name)

    async def _generate(self) -> Manifest:
        published = self.load_published()
        names = self.load_names()

        fetched: Dict[AssetCategory, List[RawAsset]] = {}
        for category in CATEGORIES:
            candidates = self.load_fetched(category)
            present = await filter_present(candidates, self.generated_dir / category.key, self.concurrency)
            fetched[category] = present
            log.info(f"{category.label}: {len(present)} of {len(candidates)} fetched assets have icons")

        return merge_manifest(published, fetched, names)

    async def generate(self) -> Manifest:
        """Compute the merged manifest without writing it."""
        async with self._lock:
            return await self._generate()

    async def build(self) -> Manifest:
        """Merge and atomically write ``manifest.json`` + ``manifest.readable.json``."""
        async with self._lock:
            manifest = await self._generate()
            payload = manifest_to_payload(manifest)
            write_json(self.manifest_path, payload, readable=False)
            write_json(self.readable_manifest_path, payload, readable=True)
        log.info(
            f"Manifest written: crypto={len(manifest.crypto)} etf={len(manifest.etf)} "
            f"currency={len(manifest.currency)}"
        )
        return manifest

    async def read_generated(self) -> Manifest:
        async with self._lock:
            return read_manifest(self.manifest_path, "build manifest")

