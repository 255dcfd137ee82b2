"""Setup stage: validate API credentials and store them."""

from __future__ import annotations

from typing import Callable

from icons_toolkit.core.logging import get_logger
from icons_toolkit.core.store import ConfigStore
from icons_toolkit.ingestion.binance import BinanceClient, validate_credential
from icons_toolkit.schemas.binance import Restrictions

log = get_logger("setup_service")

ClientFactory = Callable[[str, str], BinanceClient]


class SetupService:
    def __init__(self, store: ConfigStore, client_factory: ClientFactory):
        self.store = store
        self.client_factory = client_factory

    async def check(self, key: str, secret: str) -> Restrictions:
        """Validate the credential format and fetch the key's restrictions."""
        validate_credential(key, "Key")
        validate_credential(secret, "Secret")
        restrictions = await self.client_factory(key, secret).fetch_restrictions()

        log.info("Restrictions Checklist")
        for label, ok in restrictions.checklist():
            log.info(f"{label + ':':<28}{'√' if ok else '×'}")
        if restrictions.is_unsafe:
            log.warning("! USE THE API KEY WITH READ-ONLY PERMISSIONS!")
        return restrictions

    def save(self, key: str, secret: str, restrictions: Restrictions) -> None:
        self.store.replace(
            {
                "key": key,
                "secret": secret,
                "setup": True,
                "unsafe": restrictions.is_unsafe,
            }
        )
        log.info(f"√ The configuration file was successfully saved to {self.store.path}")
