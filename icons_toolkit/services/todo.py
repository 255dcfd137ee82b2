"""To-do report: fetched assets that have no icon in the published manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from icons_toolkit.core.logging import get_logger
from icons_toolkit.schemas.binance import RawAsset
from icons_toolkit.schemas.repository import CATEGORIES, AssetCategory, Manifest, RepositoryAsset, TodoReport
from icons_toolkit.services.manifest import ManifestService, read_manifest

log = get_logger("todo")


def build_report(
    category: AssetCategory,
    published: Iterable[RepositoryAsset],
    candidates: Sequence[RawAsset],
) -> TodoReport:
    """Candidates whose lowercase coin is not a published symbol, in fetch order."""
    symbols = {asset.symbol for asset in published}
    missing = [asset for asset in candidates if asset.coin.lower() not in symbols]
    return TodoReport(category=category, missing=missing, total=len(candidates))


def format_report(report: TodoReport) -> List[str]:
    lines = ["", f"≡ {report.category.label}", ""]
    for asset in report.missing:
        lines.append(f"▶ {asset.coin}  {asset.name}")
    if report.nothing_to_do:
        lines.append("✨ Awesome!")
        lines.append("   Nothing to do here.")
    lines.append("")
    lines.append(f"● Displayed {report.displayed} of {report.total}")
    return lines


class TodoService:
    """Diffs the intermediate fetch files against the cloned published manifest."""

    def __init__(self, published_path: Path, generated_dir: Path):
        self.published_path = Path(published_path)
        self.manifests = ManifestService(published_path, generated_dir)

    def run(self) -> List[TodoReport]:
        published: Manifest = read_manifest(self.published_path, "clone")
        reports = []
        for category in CATEGORIES:
            candidates = self.manifests.load_fetched(category)
            report = build_report(category, published.for_category(category), candidates)
            log.debug(f"{category.label}: {report.displayed} of {report.total} missing")
            reports.append(report)
        return reports
