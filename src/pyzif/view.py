"""Subscription list view: wires config, resolver, state and presenter."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pyzif.client import Resolver
from pyzif.config import ZifConfig
from pyzif.exceptions import ZifStateError
from pyzif.models.card import CardDescriptor
from pyzif.orchestrator import ResolutionOrchestrator
from pyzif.render import render
from pyzif.state.accumulator import AccumulatedState, SubscriptionAccumulator
from pyzif.state.lifetime import ViewLifetime

_logger = logging.getLogger(__name__)

Presenter = Callable[[tuple[CardDescriptor, ...]], None]
"""Receives the full card sequence on every change (e.g. an animated list)."""


class SubscriptionsView:
    """The subscriptions screen of the desktop shell.

    Usage::

        async with ZifClient(config) as client:
            view = SubscriptionsView(config, client, presenter=list_widget.update)
            view.mount()
            ...
            view.unmount()

    ``mount`` returns immediately; cards are pushed to the presenter one
    re-render at a time as references resolve.
    """

    def __init__(
        self,
        config: ZifConfig,
        resolver: Resolver,
        *,
        presenter: Presenter | None = None,
    ) -> None:
        self._config = config
        self._resolver = resolver
        self._presenter = presenter
        self._lifetime: ViewLifetime | None = None
        self._accumulator: SubscriptionAccumulator | None = None
        self._orchestrator: ResolutionOrchestrator | None = None
        self._cards: tuple[CardDescriptor, ...] = ()

    @property
    def cards(self) -> tuple[CardDescriptor, ...]:
        return self._cards

    @property
    def is_mounted(self) -> bool:
        return self._lifetime is not None and self._lifetime.is_active

    @property
    def pending(self) -> int:
        if self._orchestrator is None:
            return 0
        return self._orchestrator.pending

    def mount(self) -> None:
        """Render the empty list and start resolving the configured subscriptions."""
        if self._lifetime is not None:
            raise ZifStateError("View already mounted")
        # Fails outside an event loop before any view state is touched.
        asyncio.get_running_loop()

        lifetime = ViewLifetime()
        accumulator = SubscriptionAccumulator(lifetime)
        accumulator.subscribe(self._on_state_changed)
        self._lifetime = lifetime
        self._accumulator = accumulator
        self._orchestrator = ResolutionOrchestrator(self._resolver, accumulator, lifetime)

        self._on_state_changed(accumulator.state)
        self._orchestrator.activate(self._config.subscriptions)

    def unmount(self) -> None:
        """Tear the view down.  Resolutions still in flight are ignored when they land."""
        if self._lifetime is not None:
            self._lifetime.end()

    def _on_state_changed(self, state: AccumulatedState) -> None:
        self._cards = render(state)
        if self._presenter is None:
            return
        try:
            self._presenter(self._cards)
        except Exception:
            _logger.exception("Presenter failed to show %d card(s)", len(self._cards))
