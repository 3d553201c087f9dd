"""Projection of accumulated records into card descriptors."""

from __future__ import annotations

from pyzif.models.card import CardDescriptor
from pyzif.state.accumulator import AccumulatedState


def render(state: AccumulatedState) -> tuple[CardDescriptor, ...]:
    """One card per record, in state order.  Pure and deterministic."""
    return tuple(
        CardDescriptor(key=index, name=record.name, address=record.address)
        for index, record in enumerate(state)
    )
