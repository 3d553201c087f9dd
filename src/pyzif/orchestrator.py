"""Fan-out resolution of subscription references."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from pyzif.client import Resolver
from pyzif.exceptions import ZifStateError
from pyzif.models.reference import SubscriptionReference
from pyzif.state.accumulator import SubscriptionAccumulator
from pyzif.state.lifetime import ViewLifetime

_logger = logging.getLogger(__name__)


class ResolutionOrchestrator:
    """Resolves every configured reference independently and in parallel.

    Each reference gets its own task.  A failing or slow reference never
    affects the others; failures are dropped (logged at DEBUG only) and
    successes are appended to the accumulator in arrival order.  There is
    no cancellation and no completion event.
    """

    def __init__(
        self,
        resolver: Resolver,
        accumulator: SubscriptionAccumulator,
        lifetime: ViewLifetime | None = None,
    ) -> None:
        self._resolver = resolver
        self._accumulator = accumulator
        self._lifetime = lifetime if lifetime is not None else accumulator.lifetime
        self._tasks: set[asyncio.Task[None]] = set()
        self._activated = False

    @property
    def pending(self) -> int:
        """Number of resolutions still in flight."""
        return len(self._tasks)

    @property
    def activated(self) -> bool:
        return self._activated

    def activate(self, references: Iterable[SubscriptionReference | str]) -> None:
        """Start one resolution task per reference and return immediately.

        Must be called from a running event loop, once.
        """
        if self._activated:
            raise ZifStateError("Orchestrator already activated")
        refs = [SubscriptionReference.coerce(ref) for ref in references]
        loop = asyncio.get_running_loop()
        self._activated = True

        _logger.debug("Resolving %d subscription(s)", len(refs))
        for ref in refs:
            task = loop.create_task(self._resolve_one(ref), name=f"pyzif-resolve-{ref.address}")
            # Strong reference until done, otherwise the loop may collect it.
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _resolve_one(self, reference: SubscriptionReference) -> None:
        try:
            record = await self._resolver.resolve(reference)
        except Exception as exc:
            _logger.debug("Dropping subscription %s: %s", reference.address, exc)
            return

        if not self._lifetime.is_active:
            _logger.debug("Resolved %s after teardown, ignoring", reference.address)
            return
        self._accumulator.append(record)
