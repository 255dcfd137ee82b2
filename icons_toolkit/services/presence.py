"""Icon presence checks against the on-disk icon store."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Sequence

from icons_toolkit.core.logging import get_logger
from icons_toolkit.schemas.binance import RawAsset

log = get_logger("presence")

DEFAULT_CONCURRENCY = 16


def icon_path(base_dir: Path, coin: str) -> Path:
    return Path(base_dir) / f"{coin.lower()}.svg"


def icon_exists(asset: RawAsset, base_dir: Path) -> bool:
    """True if ``<base_dir>/<coin>.svg`` is a regular file. Never raises on absence."""
    if not asset.coin:
        return False
    try:
        return icon_path(base_dir, asset.coin).is_file()
    except OSError:
        return False


async def filter_present(
    assets: Sequence[RawAsset],
    base_dir: Path,
    concurrency: int = DEFAULT_CONCURRENCY,
) -> List[RawAsset]:
    """Keep the assets whose icon exists, in input order.

    Checks run in worker threads, at most ``concurrency`` at a time.
    """
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def check(asset: RawAsset) -> bool:
        async with semaphore:
            return await asyncio.to_thread(icon_exists, asset, base_dir)

    flags = await asyncio.gather(*(check(asset) for asset in assets))
    present = [asset for asset, ok in zip(assets, flags) if ok]
    log.debug(f"{base_dir}: {len(present)} of {len(assets)} icons present")
    return present
