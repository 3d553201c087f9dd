from __future__ import annotations

import asyncio
import logging

import pytest

from _fakes import ScriptedResolver, make_record
from pyzif.config import ZifConfig
from pyzif.exceptions import ZifResolutionError, ZifStateError
from pyzif.models.card import CardDescriptor
from pyzif.view import SubscriptionsView


async def _settle(view: SubscriptionsView) -> None:
    async def _wait() -> None:
        while view.pending:
            await asyncio.sleep(0.001)

    await asyncio.wait_for(_wait(), timeout=2.0)


@pytest.mark.asyncio
async def test_end_to_end_incremental_render() -> None:
    resolver = ScriptedResolver(
        {
            "r1": (0.020, make_record("Alpha")),
            "r2": (0.010, make_record("Beta")),
            "r3": (0.005, ZifResolutionError("unresolvable", reference="r3")),
        }
    )
    config = ZifConfig(subscriptions=("r1", "r2", "r3"))
    renders: list[tuple[CardDescriptor, ...]] = []
    view = SubscriptionsView(config, resolver, presenter=renders.append)

    view.mount()
    await _settle(view)

    assert [card.name for card in view.cards] == ["Beta", "Alpha"]
    assert [[card.name for card in cards] for cards in renders] == [
        [],
        ["Beta"],
        ["Beta", "Alpha"],
    ]
    assert sorted(resolver.calls) == ["r1", "r2", "r3"]


@pytest.mark.asyncio
async def test_mount_with_no_subscriptions_renders_empty_list() -> None:
    renders: list[tuple[CardDescriptor, ...]] = []
    view = SubscriptionsView(ZifConfig(), ScriptedResolver(), presenter=renders.append)

    view.mount()

    assert view.cards == ()
    assert renders == [()]
    assert view.pending == 0
    assert view.is_mounted


@pytest.mark.asyncio
async def test_unmount_before_resolution_keeps_cards_unchanged() -> None:
    resolver = ScriptedResolver({"r1": (0.01, make_record("Alpha"))})
    renders: list[tuple[CardDescriptor, ...]] = []
    view = SubscriptionsView(ZifConfig(subscriptions=("r1",)), resolver, presenter=renders.append)

    view.mount()
    view.unmount()
    view.unmount()
    await _settle(view)

    assert view.cards == ()
    assert renders == [()]
    assert not view.is_mounted


@pytest.mark.asyncio
async def test_mount_twice_raises() -> None:
    view = SubscriptionsView(ZifConfig(), ScriptedResolver())
    view.mount()
    with pytest.raises(ZifStateError):
        view.mount()
    view.unmount()
    with pytest.raises(ZifStateError):
        view.mount()


@pytest.mark.asyncio
async def test_presenter_failure_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    resolver = ScriptedResolver({"r1": (0.0, make_record("Alpha"))})

    def _broken(_cards: tuple[CardDescriptor, ...]) -> None:
        raise RuntimeError("widget gone")

    view = SubscriptionsView(ZifConfig(subscriptions=("r1",)), resolver, presenter=_broken)

    with caplog.at_level(logging.ERROR, logger="pyzif.view"):
        view.mount()
        await _settle(view)

    assert [card.name for card in view.cards] == ["Alpha"]
    assert "Presenter failed" in caplog.text


def test_mount_outside_event_loop_leaves_view_unmounted() -> None:
    renders: list[tuple[CardDescriptor, ...]] = []
    resolver = ScriptedResolver({"r1": (0.0, make_record("Alpha"))})
    view = SubscriptionsView(ZifConfig(subscriptions=("r1",)), resolver, presenter=renders.append)

    with pytest.raises(RuntimeError):
        view.mount()

    assert not view.is_mounted
    assert view.pending == 0
    assert renders == []

    # The failed attempt left nothing behind, so mounting inside a loop works.
    async def _mount_and_settle() -> None:
        view.mount()
        await _settle(view)

    asyncio.run(_mount_and_settle())

    assert [card.name for card in view.cards] == ["Alpha"]
    assert [[card.name for card in cards] for cards in renders] == [[], ["Alpha"]]
