"""Data models for subscriptions and their rendered cards."""

from pyzif.models.card import CardDescriptor
from pyzif.models.record import SubscriptionRecord
from pyzif.models.reference import SubscriptionReference

__all__ = [
    "CardDescriptor",
    "SubscriptionRecord",
    "SubscriptionReference",
]
