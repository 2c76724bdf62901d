"""Subscription value scoring component."""

from .base import FallingSignal


class SubscriptionSignal(FallingSignal):
    """
    Score based on subscription value.

    High-value accounts are better invested in the product.

    Contribution: (1 - min(value / 10000, 1)) * 0.10
    """

    name = "subscription"
    column = "SUBSCRIPTION_VALUE"
