"""Markdown preview tables rendered from the canonical manifest."""

from __future__ import annotations

from typing import Mapping, Sequence

from icons_toolkit.schemas.repository import (
    AssetCategory,
    CategoryTable,
    Manifest,
    MarkdownTables,
    RepositoryAsset,
)

DEFAULT_ICONS_BASE_URL = "https://raw.githubusercontent.com/VadimMalykhin/binance-icons/main"
ICON_TEMPLATE = '<img src="{base_url}/{segment}/{symbol}.svg" width="32" height="32" alt=""/>'


def icon_reference(symbol: str, category: AssetCategory, base_url: str = DEFAULT_ICONS_BASE_URL) -> str:
    return ICON_TEMPLATE.format(base_url=base_url.rstrip("/"), segment=category.url_segment, symbol=symbol)


def render_table(
    assets: Sequence[RepositoryAsset],
    category: AssetCategory,
    base_url: str = DEFAULT_ICONS_BASE_URL,
) -> str:
    """Render aligned ``| icon | symbol | name |`` rows.

    Padding is computed from this list only. The last row has no trailing
    newline; an empty list renders as an empty string.
    """
    if not assets:
        return ""

    symbol_width = max(len(asset.symbol) for asset in assets)
    name_width = max(len(asset.name) for asset in assets)

    rows = []
    for asset in assets:
        # The icon cell embeds the symbol, so it pads by the symbol width too
        pad = " " * (symbol_width - len(asset.symbol) + 1)
        name_pad = " " * (name_width - len(asset.name) + 1)
        icon = icon_reference(asset.symbol, category, base_url)
        rows.append(f"| {icon}{pad}| {asset.symbol}{pad}| {asset.name}{name_pad}|")
    return "\n".join(rows)


def render_markdown(manifest: Manifest, base_url: str = DEFAULT_ICONS_BASE_URL) -> MarkdownTables:
    def table(category: AssetCategory) -> CategoryTable:
        assets = manifest.for_category(category)
        return CategoryTable(count=len(assets), table=render_table(assets, category, base_url))

    return MarkdownTables(
        crypto=table(AssetCategory.CRYPTO),
        etf=table(AssetCategory.CRYPTO_ETF),
        currency=table(AssetCategory.FIAT_CURRENCY),
    )


def apply_template(template: str, replacements: Mapping[str, str]) -> str:
    """Replace the first occurrence of each placeholder."""
    for placeholder, value in replacements.items():
        template = template.replace(placeholder, value, 1)
    return template
