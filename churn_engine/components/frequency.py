"""Login frequency scoring component."""

from .base import FallingSignal


class LoginFrequencySignal(FallingSignal):
    """
    Score based on login frequency.

    Daily users (30+ logins) contribute nothing; customers who
    rarely log in approach the full weight.

    Contribution: (1 - min(logins / 30, 1)) * 0.15
    """

    name = "login_frequency"
    column = "LOGIN_FREQUENCY"
