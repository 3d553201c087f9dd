"""High-level async client for the Zif daemon."""

from __future__ import annotations

from typing import Any, Protocol

import aiohttp

from pyzif._api.resolve import resolve_entry
from pyzif._transport import HttpTransport, Transport
from pyzif.config import ZifConfig
from pyzif.exceptions import ZifError
from pyzif.models.record import SubscriptionRecord
from pyzif.models.reference import SubscriptionReference


class Resolver(Protocol):
    """Turns one subscription reference into a record.

    Implementations raise on failure; the kind of exception is not
    inspected by the list core.
    """

    async def resolve(self, reference: SubscriptionReference) -> SubscriptionRecord:
        ...


class ZifClient:
    """Async client for the Zif daemon command API.

    Usage::

        async with ZifClient(config) as client:
            record = await client.resolve(SubscriptionReference.coerce("Z..."))
    """

    def __init__(
        self,
        config: ZifConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._injected_transport = transport
        self._transport: Transport | None = None

    @property
    def config(self) -> ZifConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ZifClient:
        if self._injected_transport is not None:
            self._transport = self._injected_transport
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise ZifError("Client not initialized. Use 'async with ZifClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Resolver
    # ------------------------------------------------------------------

    async def resolve(self, reference: SubscriptionReference | str) -> SubscriptionRecord:
        """Resolve a Zif address into its DHT entry.

        Raises
        ------
        ZifTransportError
            The daemon could not be reached or answered garbage.
        ZifApiError
            The daemon could not resolve the address.
        ZifResolutionError
            The entry violates the daemon's entry limits.
        """
        transport = self._require_transport()
        return await resolve_entry(transport, SubscriptionReference.coerce(reference))
