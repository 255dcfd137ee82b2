"""Binance wallet API client and asset source."""

from __future__ import annotations

import hashlib
import hmac
import re
import time
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from icons_toolkit.core.exceptions import BinanceAPIError, CredentialsError
from icons_toolkit.core.logging import get_logger
from icons_toolkit.schemas.binance import APIErrorPayload, RawAsset, Restrictions
from .base import BaseSource, parse_raw_assets

log = get_logger("ingestion.binance")

DEFAULT_BASE_URL = "https://api.binance.com"
RESTRICTIONS_PATH = "/sapi/v1/account/apiRestrictions"
ALL_COINS_PATH = "/sapi/v1/capital/config/getall"

CREDENTIAL_PATTERN = re.compile(r"[A-Za-z0-9]{64}")


def validate_credential(value: Optional[str], label: str) -> str:
    if not value or not CREDENTIAL_PATTERN.fullmatch(value):
        raise CredentialsError(f"Please enter a valid API {label}")
    return value


def sign(secret: str, query: str) -> str:
    return hmac.new(secret.encode("utf-8"), query.encode("utf-8"), hashlib.sha256).hexdigest()


class BinanceClient:
    """Signed (HMAC-SHA256) GET requests against the SAPI endpoints."""

    def __init__(
        self,
        key: str,
        secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        recv_window: int = 60000,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._key = key
        self._secret = secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.recv_window = recv_window
        self._transport = transport

    def signed_query(self, params: Optional[Dict[str, Any]] = None, timestamp: Optional[int] = None) -> str:
        query: Dict[str, Any] = dict(params or {})
        query.setdefault("recvWindow", self.recv_window)
        query["timestamp"] = timestamp if timestamp is not None else int(time.time() * 1000)
        encoded = urlencode(query)
        return f"{encoded}&signature={sign(self._secret, encoded)}"

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}?{self.signed_query(params)}"
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "X-MBX-APIKEY": self._key,
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.get(url, headers=headers)

        if resp.is_success:
            return resp.json()

        try:
            error = APIErrorPayload.model_validate(resp.json())
        except (ValueError, ValidationError):
            error = APIErrorPayload(msg=resp.text or resp.reason_phrase)
        raise BinanceAPIError(error.code, error.msg, status_code=resp.status_code)

    async def fetch_restrictions(self) -> Restrictions:
        data = await self._get(RESTRICTIONS_PATH)
        return Restrictions.model_validate(data)

    async def fetch_all_raw(self) -> List[Any]:
        """All wallet coins including ETF tokens, as returned by the API."""
        data = await self._get(ALL_COINS_PATH, {"includeEtf": "true"})
        if not isinstance(data, list):
            raise BinanceAPIError(msg=f"Unexpected response type {type(data).__name__}")
        return data


class BinanceSource(BaseSource):
    """Fetches every wallet asset from Binance."""

    name = "binance"

    def __init__(self, client: BinanceClient):
        self.client = client
        self.last_payload: List[Any] = []

    async def fetch(self) -> List[RawAsset]:
        self.last_payload = await self.client.fetch_all_raw()
        assets = parse_raw_assets(self.last_payload, origin=self.name)
        log.info(f"Fetched {len(assets)} assets from Binance")
        return assets
