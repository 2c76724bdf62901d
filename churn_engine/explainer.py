"""
Human-readable churn risk factors.

Factors are diagnostic only. They are checked in a fixed order and
are independent of the scoring weights: a customer can carry a high
score with no factors, or several factors with a moderate score.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Customer

INACTIVE_DAYS = 14
HIGH_TICKET_COUNT = 5
LOW_SATISFACTION = 6
LOW_LOGIN_FREQUENCY = 5


def explain(customer: "Customer") -> list[str]:
    """
    List the risk factors present for a customer.

    Args:
        customer: Customer with features populated

    Returns:
        Factor strings in rule order (possibly empty)
    """
    factors = []
    if customer.features.days_since_last_login > INACTIVE_DAYS:
        factors.append("Inactive user")
    if customer.support_tickets > HIGH_TICKET_COUNT:
        factors.append("High support volume")
    if customer.features.support_satisfaction < LOW_SATISFACTION:
        factors.append("Low satisfaction")
    if customer.login_frequency < LOW_LOGIN_FREQUENCY:
        factors.append("Low engagement")
    return factors
