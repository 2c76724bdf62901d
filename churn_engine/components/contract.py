"""Contract length scoring component."""

from .base import FallingSignal


class ContractSignal(FallingSignal):
    """
    Score based on contract length in months.

    Three-year contracts and longer carry no contract risk.

    Contribution: (1 - min(months / 36, 1)) * 0.10
    """

    name = "contract"
    column = "CONTRACT_LENGTH"
