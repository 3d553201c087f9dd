"""Client configuration for pyzif."""

from __future__ import annotations

import dataclasses
import os
import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from pyzif._constants import DEFAULT_BASE_URL
from pyzif.exceptions import ZifConfigError
from pyzif.models.reference import SubscriptionReference

_REFERENCE_SEPARATORS = re.compile(r"[\s,]+")


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _split_references(value: str) -> list[str]:
    return [part for part in _REFERENCE_SEPARATORS.split(value) if part]


def _coerce_references(values: Iterable[SubscriptionReference | str]) -> tuple[SubscriptionReference, ...]:
    if isinstance(values, str):
        values = _split_references(values)
    try:
        return tuple(SubscriptionReference.coerce(value) for value in values)
    except ValidationError as exc:
        raise ZifConfigError(f"Invalid subscription reference: {exc}") from exc


@dataclasses.dataclass(frozen=True)
class ZifConfig:
    """Client configuration.

    Parameters
    ----------
    subscriptions : tuple of SubscriptionReference
        Ordered subscription references resolved when the list view is
        mounted.  Plain address strings are accepted and coerced.
    base_url : str
        HTTP command API of the local Zif daemon.  Defaults to the
        daemon's default ``bind.http`` address.
    request_timeout : float or None
        Total timeout in seconds for one resolve request.  ``None`` (the
        default) imposes no deadline, so a reference the daemon never
        answers simply never produces a card.
    api_trace_enabled : bool
        Log redacted request/response payloads at DEBUG level.
    """

    subscriptions: tuple[SubscriptionReference, ...] = ()
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float | None = None
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "subscriptions", _coerce_references(self.subscriptions))
        base_url = self.base_url.strip().rstrip("/")
        if not base_url:
            raise ZifConfigError("base_url must be non-empty")
        object.__setattr__(self, "base_url", base_url)
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ZifConfigError("request_timeout must be positive (or None for no deadline)")

    @classmethod
    def from_env(cls, **overrides: Any) -> ZifConfig:
        """Create configuration from environment variables.

        Reads ``ZIF_BASE_URL``, ``ZIF_SUBSCRIPTIONS`` (comma or whitespace
        separated addresses), ``ZIF_REQUEST_TIMEOUT`` and
        ``ZIF_API_TRACE_ENABLED``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("ZIF_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        subscriptions = env.get("ZIF_SUBSCRIPTIONS")
        if subscriptions is not None and "subscriptions" not in overrides:
            config_kwargs["subscriptions"] = _split_references(subscriptions)

        timeout_env = env.get("ZIF_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise ZifConfigError(f"ZIF_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(env.get("ZIF_API_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ZifConfig:
        """Create configuration from a desktop-shell settings mapping.

        Accepts the shell's camelCase keys (``subscriptions``, ``baseUrl``,
        ``requestTimeout``, ``apiTraceEnabled``); other keys are ignored.
        """
        key_map = {
            "subscriptions": "subscriptions",
            "baseUrl": "base_url",
            "requestTimeout": "request_timeout",
            "apiTraceEnabled": "api_trace_enabled",
        }
        config_kwargs: dict[str, Any] = {}
        for key, field_name in key_map.items():
            if key in data and data[key] is not None:
                config_kwargs[field_name] = data[key]

        subscriptions = config_kwargs.get("subscriptions")
        if subscriptions is not None and not isinstance(subscriptions, (str, list, tuple)):
            raise ZifConfigError("subscriptions must be a list of addresses")

        timeout = config_kwargs.get("request_timeout")
        if timeout is not None:
            try:
                config_kwargs["request_timeout"] = float(timeout)
            except (TypeError, ValueError) as exc:
                raise ZifConfigError(f"requestTimeout is not a number: {timeout!r}") from exc

        return cls(**config_kwargs)
