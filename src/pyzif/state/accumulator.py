"""Append-only accumulator of resolved subscriptions."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pyzif.models.record import SubscriptionRecord
from pyzif.state.lifetime import ViewLifetime

_logger = logging.getLogger(__name__)

AccumulatedState = tuple[SubscriptionRecord, ...]
"""Records in arrival order.  Immutable; every append produces a new value."""

StateObserver = Callable[[AccumulatedState], None]


class SubscriptionAccumulator:
    """Owns the list of resolved records for one view.

    Appends are serialised by the event loop: they are only ever made from
    loop callbacks, never from other threads, so no lock is needed.
    """

    def __init__(self, lifetime: ViewLifetime | None = None) -> None:
        self._lifetime = lifetime if lifetime is not None else ViewLifetime()
        self._state: AccumulatedState = ()
        self._observers: list[StateObserver] = []

    @property
    def state(self) -> AccumulatedState:
        return self._state

    @property
    def lifetime(self) -> ViewLifetime:
        return self._lifetime

    def __len__(self) -> int:
        return len(self._state)

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register *observer* for change notifications.

        Returns a callable that removes the observer again.
        """
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def append(self, record: SubscriptionRecord) -> AccumulatedState:
        """Add *record* at the end and notify observers.

        The previous state value is left untouched.  No deduplication: the
        same record appended twice is stored twice.  Once the lifetime has
        ended this is a no-op returning the current state.
        """
        if not self._lifetime.is_active:
            _logger.debug("Dropping %r: view no longer active", record.name)
            return self._state

        self._state = (*self._state, record)
        self._notify(self._state)
        return self._state

    def _notify(self, state: AccumulatedState) -> None:
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                _logger.exception("Subscription observer %r failed", observer)
