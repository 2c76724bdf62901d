"""Support satisfaction scoring component."""

from .base import FallingSignal


class SatisfactionSignal(FallingSignal):
    """
    Score based on support satisfaction (1-10 scale).

    Contribution: (1 - satisfaction / 10) * 0.15
    """

    name = "satisfaction"
    column = "SUPPORT_SATISFACTION"
