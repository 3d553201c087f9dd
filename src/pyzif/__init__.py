"""pyzif - Async subscription list core for the Zif desktop shell."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyzif")
except PackageNotFoundError:
    __version__ = "0+local"
from pyzif.client import Resolver, ZifClient
from pyzif.config import ZifConfig
from pyzif.exceptions import (
    ZifApiError,
    ZifConfigError,
    ZifError,
    ZifResolutionError,
    ZifStateError,
    ZifTransportError,
)
from pyzif.models import CardDescriptor, SubscriptionRecord, SubscriptionReference
from pyzif.orchestrator import ResolutionOrchestrator
from pyzif.render import render
from pyzif.state.accumulator import AccumulatedState, SubscriptionAccumulator
from pyzif.state.lifetime import ViewLifetime
from pyzif.view import Presenter, SubscriptionsView

__all__ = [
    "__version__",
    "AccumulatedState",
    "CardDescriptor",
    "Presenter",
    "ResolutionOrchestrator",
    "Resolver",
    "SubscriptionAccumulator",
    "SubscriptionRecord",
    "SubscriptionReference",
    "SubscriptionsView",
    "ViewLifetime",
    "ZifApiError",
    "ZifClient",
    "ZifConfig",
    "ZifConfigError",
    "ZifError",
    "ZifResolutionError",
    "ZifStateError",
    "ZifTransportError",
    "render",
]
