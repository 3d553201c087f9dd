"""Custom exception hierarchy for pyzif."""

from __future__ import annotations


class ZifError(Exception):
    """Base exception for all pyzif errors."""


class ZifConfigError(ZifError):
    """Invalid or missing configuration."""


class ZifStateError(ZifError):
    """A view or orchestrator was used outside its lifecycle (e.g. mounted twice)."""


class ZifTransportError(ZifError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class ZifApiError(ZifError):
    """The daemon answered with a non-``ok`` command result."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
    ) -> None:
        self.endpoint = endpoint
        super().__init__(message)


class ZifResolutionError(ZifError):
    """A subscription reference could not be turned into a valid record.

    Raised by resolvers for a single reference.  The orchestrator absorbs
    it: the reference simply never produces a card.
    """

    def __init__(self, message: str, *, reference: str = "") -> None:
        self.reference = reference
        super().__init__(message)
