#!/usr/bin/env python3
"""Print the subscription list as the daemon resolves it.

Mounts a :class:`pyzif.SubscriptionsView` against a running ``zifd`` and
prints every re-render, so you can watch cards arrive in resolution order.

Usage
-----
::

    python scripts/list_subscriptions.py ZAddress1 ZAddress2
    ZIF_SUBSCRIPTIONS="ZAddress1,ZAddress2" python scripts/list_subscriptions.py

Options::

    --base-url URL   Daemon HTTP API (default: ZIF_BASE_URL or http://127.0.0.1:8080)
    --timeout SECS   Per-request timeout (default: none)
    --wait SECS      Stop after this long even if resolutions are pending (default: 30)
    --verbose, -v    Enable debug logging (includes dropped subscriptions)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyzif import CardDescriptor, SubscriptionsView, ZifClient, ZifConfig, ZifError  # noqa: E402


def _print_cards(cards: tuple[CardDescriptor, ...]) -> None:
    print(f"── {len(cards)} subscription(s)")
    for card in cards:
        print(f"  [{card.key}] {card.name}  ({card.address})")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Resolve and print Zif subscriptions.")
    parser.add_argument("references", nargs="*", help="Zif addresses (default: ZIF_SUBSCRIPTIONS)")
    parser.add_argument("--base-url", help="Daemon HTTP API base URL")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--wait", type=float, default=30.0, help="Give up on pending resolutions after SECS")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.references:
        overrides["subscriptions"] = args.references
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout

    try:
        config = ZifConfig.from_env(**overrides)
    except ZifError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if not config.subscriptions:
        print("No subscriptions configured (pass addresses or set ZIF_SUBSCRIPTIONS).", file=sys.stderr)
        return 1

    loop = asyncio.get_running_loop()
    deadline = loop.time() + args.wait
    async with ZifClient(config) as client:
        view = SubscriptionsView(config, client, presenter=_print_cards)
        view.mount()
        while view.pending and loop.time() < deadline:
            await asyncio.sleep(0.1)
        if view.pending:
            print(f"{view.pending} subscription(s) still resolving, giving up.", file=sys.stderr)
        view.unmount()

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
