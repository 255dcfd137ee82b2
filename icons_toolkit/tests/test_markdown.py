"""Markdown rendering tests"""

from icons_toolkit.schemas.repository import AssetCategory, Manifest, RepositoryAsset
from icons_toolkit.services.markdown import apply_template, icon_reference, render_markdown, render_table

BASE = "https://example.test/icons/main"


def assets(*pairs):
    return [RepositoryAsset(symbol=s, name=n) for s, n in pairs]


class TestRenderTable:
    def test_three_rows_are_aligned(self):
        rows = assets(("btc", "Bitcoin"), ("doge", "Dogecoin"), ("op", "Optimism Network"))
        table = render_table(rows, AssetCategory.CRYPTO, BASE)

        lines = table.split("\n")
        assert len(lines) == 3
        assert not table.endswith("\n")

        symbol_width = max(len(a.symbol) for a in rows)
        name_width = max(len(a.name) for a in rows)
        for line, asset in zip(lines, rows):
            cells = line.split("|")[1:-1]
            assert len(cells) == 3
            assert cells[1] == f" {asset.symbol.ljust(symbol_width)} "
            assert cells[2] == f" {asset.name.ljust(name_width)} "
        assert len({len(line) for line in lines}) == 1

    def test_exact_row_format(self):
        table = render_table(assets(("btc", "Bitcoin"), ("op", "Optimism")), AssetCategory.CRYPTO, BASE)
        assert table == (
            f'| <img src="{BASE}/crypto/btc.svg" width="32" height="32" alt=""/> | btc | Bitcoin  |\n'
            f'| <img src="{BASE}/crypto/op.svg" width="32" height="32" alt=""/>  | op  | Optimism |'
        )

    def test_single_row_has_no_newline(self):
        assert "\n" not in render_table(assets(("usd", "US Dollar")), AssetCategory.FIAT_CURRENCY, BASE)

    def test_empty_list_renders_empty_block(self):
        assert render_table([], AssetCategory.CRYPTO, BASE) == ""

    def test_url_segments(self):
        assert "/crypto/btcup.svg" in icon_reference("btcup", AssetCategory.CRYPTO_ETF, BASE)
        assert "/currency/usd.svg" in icon_reference("usd", AssetCategory.FIAT_CURRENCY, BASE)
        assert "/crypto/btc.svg" in icon_reference("btc", AssetCategory.CRYPTO, BASE + "/")


class TestRenderMarkdown:
    def test_widths_are_per_category(self):
        manifest = Manifest(
            crypto=assets(("btc", "Bitcoin"), ("verylongsymbol", "X")),
            etf=assets(("up", "Up")),
            currency=[],
        )
        tables = render_markdown(manifest, BASE)
        assert tables.crypto.count == 2
        assert tables.etf.table == f'| <img src="{BASE}/crypto/up.svg" width="32" height="32" alt=""/> | up | Up |'
        assert tables.currency.count == 0
        assert tables.currency.table == ""

    def test_renders_fresh_each_call(self):
        first = render_markdown(Manifest(crypto=assets(("a", "A"))), BASE)
        second = render_markdown(Manifest(crypto=assets(("a", "A"), ("long", "Longer"))), BASE)
        assert first.crypto.table.count("|") == 4
        assert second.crypto.table.startswith(f'| <img src="{BASE}/crypto/a.svg" width="32" height="32" alt=""/>    | a    | A      |')


class TestTemplate:
    def test_placeholders_are_substituted(self):
        tables = render_markdown(Manifest(crypto=assets(("btc", "Bitcoin")), currency=assets(("usd", "US Dollar"))), BASE)
        template = (
            "Crypto ({{ previewCryptoCount }})\n{{ previewCryptoTable }}\n"
            "ETF ({{ previewEtfCount }})\n{{ previewEtfTable }}\n"
            "Currency ({{ previewCurrencyCount }})\n{{ previewCurrencyTable }}\n"
        )
        out = apply_template(template, tables.placeholders())
        assert "{{" not in out
        assert "Crypto (1)" in out
        assert "ETF (0)" in out
        assert "| usd | US Dollar |" in out

    def test_only_first_occurrence_is_replaced(self):
        assert apply_template("{{ x }} {{ x }}", {"{{ x }}": "1"}) == "1 {{ x }}"
