"""Explicit view lifetime token."""

from __future__ import annotations


class ViewLifetime:
    """Active/inactive status of one mounted view.

    Starts active.  ``end()`` is one-way; anything that mutates view state
    checks ``is_active`` first so completions arriving after teardown are
    no-ops.
    """

    __slots__ = ("_active",)

    def __init__(self) -> None:
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def end(self) -> None:
        self._active = False

    def __repr__(self) -> str:
        return f"ViewLifetime(active={self._active})"
