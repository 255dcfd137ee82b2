"""Fetch stage: pull wallet assets, classify them and write the intermediate files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

from icons_toolkit.core.files import write_json
from icons_toolkit.core.logging import get_logger
from icons_toolkit.ingestion.base import BaseSource
from icons_toolkit.schemas.binance import RawAsset
from icons_toolkit.schemas.repository import CATEGORIES, ClassificationResult
from icons_toolkit.services.classifier import classify_assets, sort_by_coin
from icons_toolkit.services.manifest import NAMES_FILE
from icons_toolkit.services.names import build_name_index

log = get_logger("fetch_service")

ALL_ASSETS_FILE = "all.json"


class FetchService:
    """Writes ``all.json``, ``crypto.json``, ``etf.json``, ``currency.json`` and ``cryptoNames.json``."""

    def __init__(self, source: BaseSource, generated_dir: Path):
        self.source = source
        self.generated_dir = Path(generated_dir)

    def _ensure_dirs(self) -> None:
        for category in CATEGORIES:
            (self.generated_dir / category.key).mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _payload(assets: List[RawAsset]) -> List[Any]:
        return [asset.to_payload() for asset in assets]

    async def run(self) -> ClassificationResult:
        assets = await self.source.fetch()
        self._ensure_dirs()

        raw = self.source.last_payload or self._payload(assets)
        write_json(self.generated_dir / ALL_ASSETS_FILE, raw)

        classified = classify_assets(assets)
        for category in CATEGORIES:
            bucket = sort_by_coin(classified.for_category(category))
            write_json(self.generated_dir / f"{category.key}.json", self._payload(bucket))
            log.info(f"✓ {category.label}: {len(bucket)}")

        names = build_name_index(classified.non_fiat)
        write_json(self.generated_dir / NAMES_FILE, names)
        log.debug(f"Name index: {len(names)} entries")
        return classified
