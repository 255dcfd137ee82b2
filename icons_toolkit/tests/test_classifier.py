"""Asset classification tests"""

import pytest

from conftest import raw
from icons_toolkit.ingestion.base import parse_raw_assets
from icons_toolkit.schemas.repository import AssetCategory
from icons_toolkit.services.classifier import categorize, classify_assets, is_leveraged_token_name


class TestClassifier:
    """Test bucket assignment"""

    @pytest.fixture
    def assets(self):
        return [
            raw("BTC", "Bitcoin", networks=["BTC"]),
            raw("USD", "US Dollar", legal=True),
            raw("BTCDOWN", "3X Short BTC Token"),
            raw("ETHUP", "ETHUP", networks=["ETF", "BSC"]),
            raw("EUR", "3X Long Euro Token", legal=True, networks=["ETF"]),
            raw("BNB", "BNB", networks=["BSC", "ETF"]),
            raw("XRP", "XRP", networks=["XRP"]),
        ]

    def test_end_to_end_example(self):
        """Crypto, fiat and leveraged token land in their own buckets"""
        result = classify_assets(
            [
                raw("BTC", "Bitcoin", networks=["BTC"]),
                raw("USD", "US Dollar", legal=True),
                raw("BTCDOWN", "3X Short BTC Token"),
            ]
        )
        assert [a.coin for a in result.crypto] == ["btc"]
        assert [a.coin for a in result.currency] == ["usd"]
        assert [a.coin for a in result.etf] == ["btcdown"]

    def test_buckets_are_disjoint_and_exhaustive(self, assets):
        result = classify_assets(assets)
        coins = [a.coin for a in result.crypto + result.etf + result.currency]
        assert len(coins) == len(assets)
        assert sorted(coins) == sorted(a.coin.lower() for a in assets)
        assert not {a.coin for a in result.crypto} & {a.coin for a in result.etf}
        assert not {a.coin for a in result.crypto} & {a.coin for a in result.currency}
        assert not {a.coin for a in result.etf} & {a.coin for a in result.currency}

    def test_legal_money_takes_precedence(self):
        asset = raw("EUR", "3X Long Euro Token", legal=True, networks=["ETF"])
        assert categorize(asset) is AssetCategory.FIAT_CURRENCY

    def test_only_first_network_marks_etf(self):
        assert categorize(raw("ETHUP", "ETHUP", networks=["ETF", "BSC"])) is AssetCategory.CRYPTO_ETF
        assert categorize(raw("BNB", "BNB", networks=["BSC", "ETF"])) is AssetCategory.CRYPTO

    def test_empty_network_list_does_not_raise(self):
        assert categorize(raw("ABC", "Alphabet")) is AssetCategory.CRYPTO
        assert categorize(raw("BULL", "3X Long Bitcoin Token")) is AssetCategory.CRYPTO_ETF

    def test_empty_network_tag_is_not_etf(self):
        assert categorize(raw("ABC", "Alphabet", networks=[""])) is AssetCategory.CRYPTO

    def test_preserves_input_order_and_lowercases(self, assets):
        result = classify_assets(assets)
        assert [a.coin for a in result.crypto] == ["btc", "bnb", "xrp"]
        assert [a.coin for a in result.etf] == ["btcdown", "ethup"]
        assert [a.coin for a in result.currency] == ["usd", "eur"]

    def test_does_not_mutate_input(self, assets):
        classify_assets(assets)
        assert assets[0].coin == "BTC"


class TestLeveragedTokenName:
    """Test the leveraged-token naming rule"""

    @pytest.mark.parametrize(
        "name",
        ["3X Long BTC Token", "3X Short Ethereum Token", "3X Long XRP Token"],
    )
    def test_matches(self, name):
        assert is_leveraged_token_name(name)

    @pytest.mark.parametrize(
        "name",
        ["3X BTC", "3X Long Token", "3X Long BTC", "2X Long BTC Token", "Long BTC Token 3X", ""],
    )
    def test_does_not_match(self, name):
        assert not is_leveraged_token_name(name)

    def test_short_name_with_prefix_is_crypto(self):
        assert categorize(raw("XBTC", "3X BTC")) is AssetCategory.CRYPTO


class TestMalformedRecords:
    """Test ingestion-boundary validation"""

    def test_missing_coin_is_kept_and_classified_as_crypto(self):
        assets = parse_raw_assets([{"name": "Mystery", "networkList": []}])
        assert len(assets) == 1
        result = classify_assets(assets)
        assert len(result.crypto) == 1
        assert result.crypto[0].coin == ""

    def test_missing_coin_legal_money_is_currency(self):
        result = classify_assets(parse_raw_assets([{"name": "Dollar", "isLegalMoney": True}]))
        assert len(result.currency) == 1

    def test_null_fields_are_tolerated(self):
        assets = parse_raw_assets([{"coin": None, "name": None, "isLegalMoney": None, "networkList": None}])
        assert assets[0].coin == ""
        assert assets[0].network_list == []

    def test_bad_network_entries_are_tolerated(self):
        assets = parse_raw_assets(
            [
                {"coin": "ABC", "name": "Alpha", "isLegalMoney": False, "networkList": [None]},
                {"coin": "DEF", "name": "Delta", "isLegalMoney": False, "networkList": [{"network": None}, "x"]},
                {"coin": "GHI", "name": "Gamma", "networkList": "ETF"},
            ]
        )
        result = classify_assets(assets)
        assert [a.coin for a in result.crypto] == ["abc", "def", "ghi"]
        assert all(a.first_network is None for a in assets)

    def test_malformed_record_keeps_usable_fields(self):
        assets = parse_raw_assets([{"coin": "USD", "name": ["not", "text"], "isLegalMoney": True}])
        assert len(assets) == 1
        assert assets[0].coin == "USD"
        assert assets[0].name == ""
        assert classify_assets(assets).currency[0].coin == "usd"

    def test_non_object_records_are_rejected(self):
        assets = parse_raw_assets(["BTC", 42, {"coin": "ETH", "name": "Ethereum"}])
        assert [a.coin for a in assets] == ["ETH"]

    def test_unknown_fields_are_preserved(self):
        asset = parse_raw_assets([{"coin": "BTC", "name": "Bitcoin", "trading": True}])[0]
        assert asset.to_payload()["trading"] is True
