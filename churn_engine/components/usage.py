"""Product usage scoring component."""

from .base import FallingSignal


class UsageSignal(FallingSignal):
    """
    Score based on product usage (0-100).

    Contribution: (1 - min(usage / 100, 1)) * 0.05
    """

    name = "usage"
    column = "PRODUCT_USAGE"
