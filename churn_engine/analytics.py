"""
Population analytics over the current customer set.

Analytics only read. They see whatever snapshot the repository returns
and make no consistency guarantee against concurrent writes.
"""

import logging

import numpy as np
import pandas as pd

from .repository import CustomerRepository
from .scorer import customers_to_frame

logger = logging.getLogger(__name__)

# (label, lower inclusive, upper exclusive); the last band closes at 1.0
RISK_BUCKETS = [
    ("0-0.3", 0.0, 0.3),
    ("0.3-0.7", 0.3, 0.7),
    ("0.7-1.0", 0.7, 1.0),
]
OVERFLOW_BUCKET = "other"
MAX_TREND_MONTHS = 12


class AnalyticsAggregator:
    """
    Population-level summaries.

    Usage:
        analytics = AnalyticsAggregator(repository)
        report = analytics.summary()
        report["summary"]["churnRate"]
    """

    def __init__(self, repository: CustomerRepository, sample_size: int = 10):
        """
        Args:
            repository: Storage collaborator to read from
            sample_size: Max customers listed per risk bucket
        """
        self.repository = repository
        self.sample_size = sample_size

    def frame(self) -> pd.DataFrame:
        """Snapshot of the population as a DataFrame."""
        return customers_to_frame(self.repository.all())

    def summary(self) -> dict:
        """
        Full analytics report.

        Returns:
            Dict with "summary", "riskDistribution" and "monthlyTrends"
        """
        df = self.frame()
        report = {
            "summary": population_summary(df),
            "riskDistribution": risk_distribution(df, self.sample_size),
            "monthlyTrends": monthly_trends(df),
        }
        logger.info(f"Analytics computed over {len(df)} customers")
        return report


def _mean(series: pd.Series) -> float:
    return float(series.mean()) if len(series) else 0.0


def population_summary(df: pd.DataFrame) -> dict:
    """Counts per status, churn rate and population averages."""
    total = len(df)
    counts = (
        df["CURRENT_STATUS"].value_counts()
        if total else pd.Series(dtype=int)
    )
    churned = int(counts.get("churned", 0))
    churn_rate = round(churned / total * 100, 2) if total else 0.0

    return {
        "totalCustomers": total,
        "activeCustomers": int(counts.get("active", 0)),
        "atRiskCustomers": int(counts.get("at_risk", 0)),
        "churnedCustomers": churned,
        "churnRate": churn_rate,
        "avgChurnRisk": _mean(df["CURRENT_RISK"]) if total else 0.0,
        "avgSubscriptionValue": _mean(df["SUBSCRIPTION_VALUE"]) if total else 0.0,
        "avgSupportTickets": _mean(df["SUPPORT_TICKETS"]) if total else 0.0,
    }


def assign_bucket(risk: float) -> str:
    """Risk bucket label for a score."""
    for label, low, high in RISK_BUCKETS:
        if low <= risk < high:
            return label
    last_label, _, last_high = RISK_BUCKETS[-1]
    if risk == last_high:
        return last_label
    return OVERFLOW_BUCKET


def risk_distribution(df: pd.DataFrame, sample_size: int = 10) -> list[dict]:
    """
    Histogram of current risk scores.

    Every customer lands in exactly one bucket, so counts sum to the
    population size. The overflow bucket is only reported when used.
    """
    labels = [label for label, _, _ in RISK_BUCKETS]
    if len(df):
        buckets = df["CURRENT_RISK"].astype(float).map(assign_bucket)
    else:
        buckets = pd.Series(dtype=str)

    distribution = []
    for label in labels + [OVERFLOW_BUCKET]:
        members = df[buckets == label] if len(df) else df
        if label == OVERFLOW_BUCKET and members.empty:
            continue
        sample = members.sort_values("CURRENT_RISK", ascending=False).head(sample_size)
        distribution.append({
            "bucket": label,
            "count": int(len(members)),
            "customers": [
                {
                    "name": row["NAME"],
                    "email": row["EMAIL"],
                    "churnRisk": float(row["CURRENT_RISK"]),
                }
                for _, row in sample.iterrows()
            ],
        })
    return distribution


def monthly_trends(df: pd.DataFrame, max_months: int = MAX_TREND_MONTHS) -> list[dict]:
    """
    New customers and mean risk per creation month.

    Sorted oldest to newest; when more than ``max_months`` months
    exist the most recent ones are kept. Older months are dropped,
    never the latest ones.
    """
    if not len(df):
        return []

    created = pd.to_datetime(df["CREATED_AT"], utc=True)
    grouped = (
        pd.DataFrame({
            "year": created.dt.year,
            "month": created.dt.month,
            "risk": df["CURRENT_RISK"].astype(float),
        })
        .groupby(["year", "month"])
        .agg(new_customers=("risk", "size"), avg_churn_risk=("risk", "mean"))
        .sort_index()
        .tail(max_months)
    )

    return [
        {
            "year": int(year),
            "month": int(month),
            "newCustomers": int(row["new_customers"]),
            "avgChurnRisk": float(np.round(row["avg_churn_risk"], 4)),
        }
        for (year, month), row in grouped.iterrows()
    ]
