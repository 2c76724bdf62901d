"""Base class for risk signal components."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from ..config import ScoringConfig


class BaseSignal(ABC):
    """
    Abstract base class for risk signals.

    Each signal turns one raw column into a contribution in
    [0, weight] using vectorized pandas operations. Contributions
    are never negative: the direction of a signal is baked into
    its normalization, not into the sign of its weight.
    """

    name: str = "base"
    column: str = ""

    def __init__(self, config: "ScoringConfig"):
        """
        Initialize signal with configuration.

        Args:
            config: ScoringConfig instance with weights and caps
        """
        self.config = config

    @property
    def weight(self) -> float:
        return self.config.get_weight(self.name)

    @property
    def cap(self) -> float:
        return self.config.get_cap(self.name)

    @property
    def required_columns(self) -> list[str]:
        """List of columns required by this signal."""
        return [self.column]

    def ratio(self, values: pd.Series) -> pd.Series:
        """Raw value over its cap, bounded to [0, 1]."""
        return (values.astype(float) / self.cap).clip(lower=0.0, upper=1.0)

    @abstractmethod
    def normalize(self, values: pd.Series) -> pd.Series:
        """
        Map raw values to [0, 1], where 1 is the riskiest.

        Must be implemented by subclasses using vectorized operations.
        """
        pass

    def score(self, df: pd.DataFrame) -> pd.Series:
        """
        Calculate weighted contribution for all rows.

        Args:
            df: DataFrame with required columns

        Returns:
            Series of float contributions in [0, weight]
        """
        self.validate(df)
        contribution = self.normalize(df[self.column]) * self.weight
        return pd.Series(contribution, index=df.index, dtype=float)

    def validate(self, df: pd.DataFrame) -> None:
        """Validate required columns exist."""
        missing = set(self.required_columns) - set(df.columns)
        if missing:
            raise ValueError(
                f"{self.__class__.__name__} requires columns: {missing}"
            )


class RisingSignal(BaseSignal):
    """Signal where a larger raw value means more risk."""

    def normalize(self, values: pd.Series) -> pd.Series:
        return self.ratio(values)


class FallingSignal(BaseSignal):
    """Signal where a larger raw value means less risk."""

    def normalize(self, values: pd.Series) -> pd.Series:
        return 1.0 - self.ratio(values)
