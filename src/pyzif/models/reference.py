"""Subscription references."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SubscriptionReference(BaseModel):
    """An opaque, immutable pointer to one subscription (a Zif address)."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Encoded Zif address")

    @model_validator(mode="before")
    @classmethod
    def _from_plain_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"address": value}
        return value

    @field_validator("address")
    @classmethod
    def _normalize_address(cls, value: str) -> str:
        address = value.strip()
        if not address:
            raise ValueError("address must be non-empty")
        return address

    @classmethod
    def coerce(cls, value: SubscriptionReference | str) -> SubscriptionReference:
        """Return *value* as a reference, parsing plain strings."""
        if isinstance(value, SubscriptionReference):
            return value
        return cls.model_validate(value)

    def __str__(self) -> str:
        return self.address
