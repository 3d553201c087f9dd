"""Resolve endpoint: turn a Zif address into its DHT entry."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from pyzif._constants import RESOLVE_ENDPOINT, STATUS_OK
from pyzif._transport import Transport
from pyzif.exceptions import ZifApiError, ZifResolutionError
from pyzif.models.record import SubscriptionRecord
from pyzif.models.reference import SubscriptionReference

_logger = logging.getLogger(__name__)


def build_resolve_endpoint(reference: SubscriptionReference) -> str:
    return RESOLVE_ENDPOINT.format(address=quote(reference.address, safe=""))


def unwrap_command_result(response: dict[str, Any], *, endpoint: str) -> Any:
    """Return the ``value`` of a daemon command result.

    The daemon answers ``{"status": "ok", "value": ...}`` on success and
    ``{"status": "err", "error": "..."}`` otherwise.
    """
    status = response.get("status")
    if status != STATUS_OK:
        message = response.get("error") or "unknown error"
        raise ZifApiError(f"{endpoint} failed: status={status} error={message}", endpoint=endpoint)
    if "value" not in response:
        raise ZifApiError(f"{endpoint} returned no value", endpoint=endpoint)
    return response["value"]


def parse_entry(value: Any, reference: SubscriptionReference) -> SubscriptionRecord:
    """Validate a resolved entry against the daemon's entry limits."""
    if not isinstance(value, dict):
        raise ZifResolutionError(
            f"Entry for {reference.address} is not an object",
            reference=reference.address,
        )
    try:
        record = SubscriptionRecord.model_validate(value)
    except ValidationError as exc:
        raise ZifResolutionError(
            f"Invalid entry for {reference.address}: {exc.error_count()} validation error(s)",
            reference=reference.address,
        ) from exc
    return record.model_copy(update={"address": reference.address})


async def resolve_entry(transport: Transport, reference: SubscriptionReference) -> SubscriptionRecord:
    endpoint = build_resolve_endpoint(reference)
    response = await transport.get_json(endpoint)
    value = unwrap_command_result(response, endpoint=endpoint)
    record = parse_entry(value, reference)
    _logger.debug("Resolved %s to %r", reference.address, record.name)
    return record
