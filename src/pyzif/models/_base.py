"""Base model for Zif daemon payloads.

Every record model inherits from :class:`ZifBaseModel` which provides:

* ``alias_generator=to_camel`` so the daemon's camelCase JSON keys
  (``publicAddress``, ``postCount``) map to snake_case fields.
* A ``model_validator(mode="before")`` that drops ``null`` values so the
  field default is used.
* A ``raw`` dict that captures the original payload, so fields the core
  does not interpret (keys, signatures, seeds) pass through untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ZifBaseModel(BaseModel):
    """Base for Zif daemon response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original daemon payload."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        """Drop ``null`` values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if value is not None}
        # Keep an explicitly passed raw= (kwargs construction); otherwise
        # the validated dict itself is the raw payload.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
