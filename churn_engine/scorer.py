"""
Main RiskScorer class - orchestrates risk signal components.

Usage:
    from churn_engine import RiskScorer, ScoringConfig

    # With default config
    scorer = RiskScorer()
    result = scorer.score(df)

    # Single customer
    risk = scorer.score_customer(customer)

    # Access results
    print(result.df[["CUSTOMER_ID", "CHURN_RISK", "STATUS"]])
    print(result.summary())
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

import pandas as pd

from .classifier import classify_status, risk_level
from .components import (
    LoginRecencySignal,
    SupportVolumeSignal,
    LoginFrequencySignal,
    ContractSignal,
    SatisfactionSignal,
    SubscriptionSignal,
    UsageSignal,
)
from .config import ScoringConfig, DEFAULT_CONFIG
from .schemas import SCORING_INPUT_SCHEMA

if TYPE_CHECKING:
    from .models import Customer


@dataclass
class ScoringResult:
    """
    Container for scoring results with signal breakdown.

    Attributes:
        df: Original DataFrame with scores added
        signal_columns: List of signal contribution column names
    """

    df: pd.DataFrame
    signal_columns: list[str]

    def get_at_risk(self, min_status: str = "at_risk") -> pd.DataFrame:
        """
        Get customers at or above a status.

        Args:
            min_status: Minimum status ("active", "at_risk", "churned")

        Returns:
            DataFrame filtered to customers at or above the status
        """
        status_order = ["active", "at_risk", "churned"]
        min_idx = status_order.index(min_status)
        return self.df[self.df["STATUS"].isin(status_order[min_idx:])]

    def summary(self) -> pd.DataFrame:
        """
        Counts and average score per status.

        Returns:
            DataFrame indexed by status
        """
        return (
            self.df.groupby("STATUS")
            .agg(
                count=("CUSTOMER_ID", "count"),
                avg_risk=("CHURN_RISK", "mean"),
            )
            .round(3)
        )

    def signal_breakdown(self) -> pd.DataFrame:
        """
        Show average contribution of each signal.

        Returns:
            DataFrame with signal statistics
        """
        stats = {}
        for col in self.signal_columns:
            signal_name = col.replace("_score", "")
            stats[signal_name] = {
                "mean": self.df[col].mean(),
                "max": self.df[col].max(),
                "min": self.df[col].min(),
            }
        return pd.DataFrame(stats).T.round(3)


class RiskScorer:
    """
    Vectorized churn risk scoring engine.

    Starts every customer at the base risk and adds one non-negative
    contribution per signal, then clamps into [0, 1].

    Signals (default weights):
    - Login Recency (0-0.25): days since last login
    - Support Volume (0-0.20): support ticket count
    - Login Frequency (0-0.15): low frequency raises risk
    - Contract (0-0.10): short contracts raise risk
    - Satisfaction (0-0.15): low support satisfaction raises risk
    - Subscription (0-0.10): low subscription value raises risk
    - Usage (0-0.05): low product usage raises risk
    """

    REQUIRED_COLUMNS = [
        "CUSTOMER_ID",
        "DAYS_SINCE_LAST_LOGIN",
        "SUPPORT_TICKETS",
        "LOGIN_FREQUENCY",
        "CONTRACT_LENGTH",
        "SUPPORT_SATISFACTION",
        "SUBSCRIPTION_VALUE",
        "PRODUCT_USAGE",
    ]

    def __init__(self, config: Optional[ScoringConfig] = None):
        """
        Initialize scorer with configuration.

        Args:
            config: ScoringConfig instance. Uses DEFAULT_CONFIG if None.
        """
        self.config = config or DEFAULT_CONFIG
        self._init_components()

    def _init_components(self) -> None:
        """Initialize all signal components."""
        self.components = {
            "login_recency": LoginRecencySignal(self.config),
            "support_volume": SupportVolumeSignal(self.config),
            "login_frequency": LoginFrequencySignal(self.config),
            "contract": ContractSignal(self.config),
            "satisfaction": SatisfactionSignal(self.config),
            "subscription": SubscriptionSignal(self.config),
            "usage": UsageSignal(self.config),
        }

    @property
    def model_version(self) -> str:
        return self.config.model_version

    def validate_input(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Validate required columns exist and values are in range.

        Args:
            df: Input DataFrame

        Returns:
            Validated (type-coerced) DataFrame

        Raises:
            ValueError: If required columns are missing
            pandera.errors.SchemaError: If values are out of range
        """
        missing = set(self.REQUIRED_COLUMNS) - set(df.columns)
        if missing:
            raise ValueError(f"Missing required columns: {missing}")
        return SCORING_INPUT_SCHEMA.validate(df)

    def clamp(self, risk: pd.Series) -> pd.Series:
        """Clamp raw risk into [min_score, max_score]."""
        return risk.clip(lower=self.config.min_score, upper=self.config.max_score)

    def score(self, df: pd.DataFrame) -> ScoringResult:
        """
        Calculate churn risk for all customers.

        Args:
            df: DataFrame with required columns

        Returns:
            ScoringResult with risk, status, risk level and signal breakdown

        Example:
            >>> scorer = RiskScorer()
            >>> result = scorer.score(customers_to_frame(customers))
            >>> at_risk = result.get_at_risk("at_risk")
        """
        result = self.validate_input(df.copy())

        # Calculate all signal contributions (vectorized)
        signal_cols = []
        for name, component in self.components.items():
            col_name = f"{name}_score"
            result[col_name] = component.score(result)
            signal_cols.append(col_name)

        raw = self.config.base_risk + result[signal_cols].sum(axis=1)
        result["CHURN_RISK"] = self.clamp(raw).astype(float)

        result["STATUS"] = result["CHURN_RISK"].apply(
            lambda s: classify_status(s, self.config)
        )
        result["RISK_LEVEL"] = result["CHURN_RISK"].apply(
            lambda s: risk_level(s, self.config)
        )

        return ScoringResult(df=result, signal_columns=signal_cols)

    def score_single(self, customer_data: dict) -> dict:
        """
        Score a single customer row (convenience method).

        Args:
            customer_data: Dictionary with required fields

        Returns:
            Dictionary with risk, status, level and signal contributions
        """
        df = pd.DataFrame([customer_data])
        result = self.score(df)
        row = result.df.iloc[0]
        return {
            "CHURN_RISK": float(row["CHURN_RISK"]),
            "STATUS": row["STATUS"],
            "RISK_LEVEL": row["RISK_LEVEL"],
            "components": {
                col.replace("_score", ""): float(row[col])
                for col in result.signal_columns
            },
        }

    def score_customer(self, customer: "Customer") -> float:
        """Churn risk in [0, 1] for one customer record."""
        return self.score_single(customer_to_row(customer))["CHURN_RISK"]


def customer_to_row(customer: "Customer") -> dict:
    """Flatten a customer into a scoring row."""
    features = customer.features
    return {
        "CUSTOMER_ID": customer.id,
        "NAME": customer.name,
        "EMAIL": customer.email,
        "COMPANY": customer.company,
        "DAYS_SINCE_LAST_LOGIN": features.days_since_last_login,
        "SUPPORT_TICKETS": customer.support_tickets,
        "LOGIN_FREQUENCY": customer.login_frequency,
        "CONTRACT_LENGTH": customer.contract_length,
        "SUPPORT_SATISFACTION": features.support_satisfaction,
        "SUBSCRIPTION_VALUE": customer.subscription_value,
        "PRODUCT_USAGE": features.product_usage,
        "CURRENT_RISK": customer.churn_risk,
        "CURRENT_STATUS": customer.status,
        "CREATED_AT": customer.created_at,
    }


ROW_COLUMNS = [
    "CUSTOMER_ID",
    "NAME",
    "EMAIL",
    "COMPANY",
    "DAYS_SINCE_LAST_LOGIN",
    "SUPPORT_TICKETS",
    "LOGIN_FREQUENCY",
    "CONTRACT_LENGTH",
    "SUPPORT_SATISFACTION",
    "SUBSCRIPTION_VALUE",
    "PRODUCT_USAGE",
    "CURRENT_RISK",
    "CURRENT_STATUS",
    "CREATED_AT",
]


def customers_to_frame(customers: Iterable["Customer"]) -> pd.DataFrame:
    """Build a scoring frame from customer records."""
    rows = [customer_to_row(c) for c in customers]
    return pd.DataFrame(rows, columns=ROW_COLUMNS)
