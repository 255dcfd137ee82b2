"""Exchange-side schemas (Binance wallet API)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NetworkDescriptor(BaseModel):
    """One entry of an asset's ``networkList``; only ``network`` is interpreted."""

    model_config = ConfigDict(extra="allow", frozen=True)

    network: str = ""

    @field_validator("network", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value


class RawAsset(BaseModel):
    """Asset record as reported by ``/sapi/v1/capital/config/getall``.

    Fields the toolkit does not interpret are kept as extras so the generated
    JSON files carry the full exchange payload.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    coin: str = ""
    name: str = ""
    is_legal_money: bool = Field(default=False, alias="isLegalMoney")
    network_list: List[NetworkDescriptor] = Field(default_factory=list, alias="networkList")

    @field_validator("coin", "name", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("is_legal_money", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("network_list", mode="before")
    @classmethod
    def _coerce_networks(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        # Entries that are not objects become empty descriptors
        return [entry if isinstance(entry, (dict, NetworkDescriptor)) else {} for entry in value]

    @property
    def first_network(self) -> Optional[str]:
        if not self.network_list:
            return None
        return self.network_list[0].network or None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Restrictions(BaseModel):
    """Permissions of an API key (``/sapi/v1/account/apiRestrictions``)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    ip_restrict: bool = Field(default=False, alias="ipRestrict")
    create_time: Optional[int] = Field(default=None, alias="createTime")
    enable_reading: bool = Field(default=False, alias="enableReading")
    enable_spot_and_margin_trading: bool = Field(default=False, alias="enableSpotAndMarginTrading")
    enable_margin: bool = Field(default=False, alias="enableMargin")
    enable_futures: bool = Field(default=False, alias="enableFutures")
    enable_vanilla_options: bool = Field(default=False, alias="enableVanillaOptions")
    enable_internal_transfer: bool = Field(default=False, alias="enableInternalTransfer")
    permits_universal_transfer: bool = Field(default=False, alias="permitsUniversalTransfer")
    enable_withdrawals: bool = Field(default=False, alias="enableWithdrawals")

    @property
    def is_unsafe(self) -> bool:
        """True when the key can do anything beyond reading."""
        return any(
            (
                self.enable_spot_and_margin_trading,
                self.enable_margin,
                self.enable_futures,
                self.enable_vanilla_options,
                self.enable_internal_transfer,
                self.permits_universal_transfer,
                self.enable_withdrawals,
            )
        )

    def checklist(self) -> List[tuple[str, bool]]:
        """(label, ok) rows; reading must be on, everything else off."""
        return [
            ("Reading", self.enable_reading),
            ("Spot and Margin Trading", not self.enable_spot_and_margin_trading),
            ("Margin", not self.enable_margin),
            ("Futures", not self.enable_futures),
            ("Vanilla Options", not self.enable_vanilla_options),
            ("Internal Transfer", not self.enable_internal_transfer),
            ("Permits Universal Transfer", not self.permits_universal_transfer),
            ("Withdrawals", not self.enable_withdrawals),
        ]


class APIErrorPayload(BaseModel):
    code: Optional[int] = None
    msg: Optional[str] = None
