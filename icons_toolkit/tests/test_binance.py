"""Exchange client tests"""

from urllib.parse import parse_qsl, urlsplit

import httpx
import pytest

from icons_toolkit.core.exceptions import BinanceAPIError, CredentialsError
from icons_toolkit.ingestion.binance import BinanceClient, BinanceSource, sign, validate_credential

KEY = "A" * 64
SECRET = "b1" * 32


def client_for(handler) -> BinanceClient:
    return BinanceClient(KEY, SECRET, base_url="https://api.test", transport=httpx.MockTransport(handler))


class TestSigning:
    def test_signature_covers_query(self):
        client = BinanceClient(KEY, SECRET)
        query = client.signed_query({"includeEtf": "true"}, timestamp=1700000000000)
        payload, _, signature = query.rpartition("&signature=")

        assert payload == "includeEtf=true&recvWindow=60000&timestamp=1700000000000"
        assert signature == sign(SECRET, payload)
        assert len(signature) == 64

    def test_validate_credential(self):
        assert validate_credential(KEY, "Key") == KEY
        with pytest.raises(CredentialsError):
            validate_credential("short", "Key")
        with pytest.raises(CredentialsError):
            validate_credential(None, "Secret")

    @pytest.mark.parametrize("value", ["A" * 64 + "\n", "A" * 63 + "٣", "A" * 65, "A" * 32 + "-" * 32])
    def test_validate_credential_rejects_near_misses(self, value):
        with pytest.raises(CredentialsError):
            validate_credential(value, "Key")


class TestClient:
    @pytest.mark.asyncio
    async def test_fetch_all_sends_key_and_signature(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["headers"] = request.headers
            seen["url"] = str(request.url)
            return httpx.Response(200, json=[{"coin": "BTC", "name": "Bitcoin", "isLegalMoney": False, "networkList": []}])

        data = await client_for(handler).fetch_all_raw()

        assert data[0]["coin"] == "BTC"
        assert seen["headers"]["X-MBX-APIKEY"] == KEY
        parts = urlsplit(seen["url"])
        assert parts.path == "/sapi/v1/capital/config/getall"
        params = dict(parse_qsl(parts.query))
        assert params["includeEtf"] == "true"
        assert "signature" in params and "timestamp" in params

    @pytest.mark.asyncio
    async def test_error_payload_is_raised(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"code": -2015, "msg": "Invalid API-key"})

        with pytest.raises(BinanceAPIError) as exc_info:
            await client_for(handler).fetch_all_raw()
        assert exc_info.value.code == -2015
        assert exc_info.value.msg == "Invalid API-key"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_non_json_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(BinanceAPIError) as exc_info:
            await client_for(handler).fetch_all_raw()
        assert exc_info.value.code == -1

    @pytest.mark.asyncio
    async def test_restrictions(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/sapi/v1/account/apiRestrictions"
            return httpx.Response(200, json={"enableReading": True, "enableWithdrawals": True, "ipRestrict": False})

        restrictions = await client_for(handler).fetch_restrictions()
        assert restrictions.enable_reading
        assert restrictions.is_unsafe
        assert ("Withdrawals", False) in restrictions.checklist()

    @pytest.mark.asyncio
    async def test_read_only_key_is_safe(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"enableReading": True})

        restrictions = await client_for(handler).fetch_restrictions()
        assert not restrictions.is_unsafe
        assert all(ok for _, ok in restrictions.checklist())


class TestSource:
    @pytest.mark.asyncio
    async def test_fetch_validates_records(self):
        payload = [
            {"coin": "BTC", "name": "Bitcoin", "isLegalMoney": False, "networkList": [{"network": "BTC"}]},
            "garbage",
        ]

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payload)

        source = BinanceSource(client_for(handler))
        assets = await source.fetch()
        assert [a.coin for a in assets] == ["BTC"]
        assert source.last_payload == payload
