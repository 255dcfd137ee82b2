"""Shared fixtures"""

from pathlib import Path
from typing import Any, Dict, List

import pytest

from icons_toolkit.core.config import Settings
from icons_toolkit.core.files import write_json
from icons_toolkit.schemas.binance import RawAsset


def raw(coin: Any, name: str = "", legal: bool = False, networks: List[str] = None, **extra: Any) -> RawAsset:
    payload: Dict[str, Any] = {
        "coin": coin,
        "name": name,
        "isLegalMoney": legal,
        "networkList": [{"network": n} for n in (networks or [])],
    }
    payload.update(extra)
    return RawAsset.model_validate(payload)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temp app directory"""
    return Settings(APP_DIR=tmp_path / "app", LOG_TO_FILE=False)


@pytest.fixture
def published_manifest() -> Dict[str, Any]:
    return {
        "crypto": [{"symbol": "btc", "name": "Bitcoin"}, {"symbol": "eth", "name": "Ethereum"}],
        "etf": [{"symbol": "btcup", "name": "BTCUP"}],
        "currency": [{"symbol": "usd", "name": "US Dollar"}],
    }


@pytest.fixture
def workspace(settings: Settings, published_manifest: Dict[str, Any]) -> Settings:
    """Cloned main branch, fetched intermediate files and a few generated icons"""
    write_json(settings.branch_dir("main") / "manifest.json", published_manifest)

    generated = settings.generated_dir
    write_json(
        generated / "crypto.json",
        [
            {"coin": "ada", "name": "", "isLegalMoney": False, "networkList": [{"network": "ADA"}]},
            {"coin": "btc", "name": "", "isLegalMoney": False, "networkList": [{"network": "BTC"}]},
            {"coin": "doge", "name": "Dogecoin", "isLegalMoney": False, "networkList": []},
        ],
    )
    write_json(
        generated / "etf.json",
        [{"coin": "btcdown", "name": "BTCDOWN", "isLegalMoney": False, "networkList": [{"network": "ETF"}]}],
    )
    write_json(generated / "currency.json", [{"coin": "eur", "name": "Euro", "isLegalMoney": True, "networkList": []}])
    write_json(generated / "cryptoNames.json", {"ada": "Cardano", "btc": "Bitcoin", "doge": "Dogecoin"})

    for category, coins in {"crypto": ["ada", "btc"], "etf": ["btcdown"], "currency": []}.items():
        (generated / category).mkdir(parents=True, exist_ok=True)
        for coin in coins:
            (generated / category / f"{coin}.svg").write_text("<svg/>", encoding="utf-8")
    return settings
