from icons_toolkit.ingestion.base import BaseSource, parse_raw_assets
from icons_toolkit.ingestion.binance import BinanceClient, BinanceSource
from icons_toolkit.ingestion.git import GitClient

__all__ = [
    "BaseSource",
    "BinanceClient",
    "BinanceSource",
    "GitClient",
    "parse_raw_assets",
]
