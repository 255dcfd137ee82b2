"""Build stage: icons, manifest and markdown, individually or all in order."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal

from icons_toolkit.core.config import Settings
from icons_toolkit.core.exceptions import MissingDependencyError
from icons_toolkit.core.files import write_atomic
from icons_toolkit.core.logging import get_logger
from icons_toolkit.schemas.repository import CATEGORIES, AssetCategory, Manifest, MarkdownTables
from icons_toolkit.services.manifest import MANIFEST_FILE, ManifestService
from icons_toolkit.services.markdown import apply_template, render_markdown
from icons_toolkit.services.optimizer import DEFAULT_ID_PREFIX, optimize_svg

log = get_logger("build_service")

BuildTarget = Literal["all", "icons", "manifest", "markdown"]
BUILD_TARGETS: List[str] = ["all", "icons", "manifest", "markdown"]

README_TEMPLATE = "README.template.md"
PREVIEW_TEMPLATE = "PREVIEW.template.md"


class BuildService:
    """Turns the cloned sources and fetched assets into the generated artifacts.

    Responsibilities:
    - Optimize source SVG icons into ``generated/<category>/``
    - Merge the published manifest with fetched assets that have icons
    - Render README/PREVIEW markdown from the generated manifest
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.generated_dir = settings.generated_dir
        self.sources_dir = settings.branch_dir("dev") / "sources"
        self.manifests = ManifestService(
            settings.branch_dir("main") / MANIFEST_FILE,
            settings.generated_dir,
            settings.ICON_CHECK_CONCURRENCY,
        )

    async def run(self, target: BuildTarget) -> Dict[str, Any]:
        """Run one target; ``all`` stops at the first failing phase."""
        started = datetime.now(timezone.utc)
        results: Dict[str, Any] = {}
        phases = ["icons", "manifest", "markdown"] if target == "all" else [target]
        for phase in phases:
            if phase == "icons":
                results[phase] = await asyncio.to_thread(self.build_icons)
            elif phase == "manifest":
                results[phase] = await self.build_manifest()
            elif phase == "markdown":
                results[phase] = await self.build_markdown()
            else:
                raise ValueError(f"Unsupported build target: {phase}")
        elapsed = (datetime.now(timezone.utc) - started).total_seconds()
        log.info(f"Build '{target}' finished in {elapsed:.2f}s")
        return results

    # -------------------------------------------------------------------------
    # Icons
    # -------------------------------------------------------------------------
    def build_icons(self) -> Dict[str, int]:
        log.info("Building icons...")
        if not self.sources_dir.is_dir():
            raise MissingDependencyError(f"Sources directory {self.sources_dir}", "clone dev")

        counts: Dict[str, int] = {}
        for category in CATEGORIES:
            counts[category.key] = self._build_category_icons(category)
        log.info(f"√ Build icons done: {counts}")
        return counts

    def _build_category_icons(self, category: AssetCategory) -> int:
        source_dir = self.sources_dir / category.key
        target_dir = self.generated_dir / category.key
        target_dir.mkdir(parents=True, exist_ok=True)
        if not source_dir.is_dir():
            log.warning(f"No {category.key} sources in {source_dir}")
            return 0

        count = 0
        for source in sorted(source_dir.glob("*.svg")):
            prefix = source.stem if category.id_prefix_from_symbol else DEFAULT_ID_PREFIX
            optimize_svg(source, target_dir / source.name, prefix)
            count += 1
        return count

    # -------------------------------------------------------------------------
    # Manifest
    # -------------------------------------------------------------------------
    async def build_manifest(self) -> Manifest:
        log.info("Building manifest...")
        manifest = await self.manifests.build()
        log.info("√ Build manifest done.")
        return manifest

    # -------------------------------------------------------------------------
    # Markdown
    # -------------------------------------------------------------------------
    def _read_template(self, name: str) -> str:
        path = self.sources_dir / name
        if not path.is_file():
            raise MissingDependencyError(f"Template {path}", "clone dev")
        return path.read_text(encoding="utf-8")

    async def build_markdown(self) -> MarkdownTables:
        log.info("Building markdown...")
        readme = self._read_template(README_TEMPLATE)
        preview_template = self._read_template(PREVIEW_TEMPLATE)

        manifest = await self.manifests.read_generated()
        tables = render_markdown(manifest, self.settings.ICONS_BASE_URL)

        write_atomic(self.generated_dir / "README.md", readme)
        log.info("√ Updating `README.md` done")
        write_atomic(self.generated_dir / "PREVIEW.md", apply_template(preview_template, tables.placeholders()))
        log.info("√ Updating `PREVIEW.md` done")
        return tables

