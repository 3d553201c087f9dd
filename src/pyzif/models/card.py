"""Card descriptors handed to list presenters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CardDescriptor(BaseModel):
    """Display-ready projection of one subscription record.

    ``key`` is the record's position in the accumulated state.  The state
    only ever grows at the end, so a key always refers to the same card
    and presenters can use it for enter/leave transitions.
    """

    model_config = ConfigDict(frozen=True)

    key: int
    name: str
    address: str | None = None
