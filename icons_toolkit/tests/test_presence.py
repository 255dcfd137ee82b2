"""Icon presence filter tests"""

import pytest

from conftest import raw
from icons_toolkit.services.presence import filter_present, icon_exists


class TestIconExists:
    def test_regular_file(self, tmp_path):
        (tmp_path / "btc.svg").write_text("<svg/>")
        assert icon_exists(raw("BTC"), tmp_path)

    def test_missing_file(self, tmp_path):
        assert icon_exists(raw("eth"), tmp_path) is False

    def test_missing_directory(self, tmp_path):
        assert icon_exists(raw("eth"), tmp_path / "nope") is False

    def test_directory_is_not_an_icon(self, tmp_path):
        (tmp_path / "dir.svg").mkdir()
        assert icon_exists(raw("dir"), tmp_path) is False

    def test_empty_coin(self, tmp_path):
        (tmp_path / ".svg").write_text("<svg/>")
        assert icon_exists(raw(""), tmp_path) is False


class TestFilterPresent:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("concurrency", [1, 4, 64])
    async def test_keeps_input_order(self, tmp_path, concurrency):
        for coin in ["zec", "ada", "btc"]:
            (tmp_path / f"{coin}.svg").write_text("<svg/>")
        assets = [raw(c) for c in ["zec", "eth", "ada", "xrp", "btc"]]

        present = await filter_present(assets, tmp_path, concurrency=concurrency)
        assert [a.coin for a in present] == ["zec", "ada", "btc"]

    @pytest.mark.asyncio
    async def test_empty_input(self, tmp_path):
        assert await filter_present([], tmp_path) == []
