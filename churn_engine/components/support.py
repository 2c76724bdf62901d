"""Support volume scoring component."""

from .base import RisingSignal


class SupportVolumeSignal(RisingSignal):
    """
    Score based on the number of support tickets raised.

    Many tickets signal friction with the product.

    Contribution: min(tickets / 10, 1) * 0.20
    """

    name = "support_volume"
    column = "SUPPORT_TICKETS"
