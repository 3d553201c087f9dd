"""Resolved subscription records (Zif DHT entries)."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, ValidationInfo, field_validator

from pyzif._constants import (
    MAX_ENTRY_DESC_LENGTH,
    MAX_ENTRY_NAME_LENGTH,
    MAX_ENTRY_PUBLIC_ADDRESS_LENGTH,
    MAX_ENTRY_PORT,
)
from pyzif.models._base import ZifBaseModel


def _parse_updated(value: Any) -> datetime | None:
    """Convert the daemon's ``updated`` epoch seconds to a UTC datetime.

    Zero means "never updated" and maps to ``None``.
    """
    if value is None or isinstance(value, datetime):
        return value
    ts = int(value)
    if ts <= 0:
        return None
    # The daemon sends a uint64; values past the platform time_t range fail here.
    try:
        return datetime.fromtimestamp(ts, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"updated out of range: {ts}") from exc


ZifTimestamp = Annotated[datetime | None, BeforeValidator(_parse_updated)]

_BYTE_LIMITS: dict[str, int] = {
    "name": MAX_ENTRY_NAME_LENGTH,
    "desc": MAX_ENTRY_DESC_LENGTH,
    # Public addresses must stay strictly below the DNS name limit.
    "public_address": MAX_ENTRY_PUBLIC_ADDRESS_LENGTH - 1,
}


class SubscriptionRecord(ZifBaseModel):
    """One resolved subscription.

    Only ``name`` is interpreted by the list core.  The remaining typed
    fields mirror the daemon's entry JSON; key material, signatures and
    seed lists stay in ``raw``.
    """

    name: str
    address: str | None = None
    desc: str = ""
    public_address: str = ""
    post_count: int = Field(default=0, ge=0)
    port: int = Field(default=0, ge=0, le=MAX_ENTRY_PORT)
    seen: int = Field(default=0, validation_alias="seed")
    updated: ZifTimestamp = None

    @field_validator("address", mode="before")
    @classmethod
    def _encoded_address_only(cls, value: Any) -> Any:
        # Entries carry their address as {"Raw": <base64>}; the encoded
        # form is supplied by the resolver from the reference instead.
        if isinstance(value, dict):
            return None
        return value

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must be non-empty")
        return value

    @field_validator("name", "desc", "public_address")
    @classmethod
    def _within_entry_limits(cls, value: str, info: ValidationInfo) -> str:
        # The daemon measures these in UTF-8 bytes, not characters.
        limit = _BYTE_LIMITS[info.field_name]
        if len(value.encode("utf-8")) > limit:
            raise ValueError(f"{info.field_name} longer than {limit} bytes")
        return value
