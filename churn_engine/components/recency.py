"""Login recency scoring component."""

from .base import RisingSignal


class LoginRecencySignal(RisingSignal):
    """
    Score based on days since the customer last logged in.

    A customer who has not been seen for a month is as inactive
    as the signal can express; anything longer is capped.

    Contribution: min(days / 30, 1) * 0.25
    """

    name = "login_recency"
    column = "DAYS_SINCE_LAST_LOGIN"
