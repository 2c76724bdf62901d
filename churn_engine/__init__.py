"""
Churn Risk Engine Package

A fixed linear scoring rule for customer churn risk, with status
classification, prediction history and population analytics.
"""

from .scorer import RiskScorer, ScoringResult
from .config import ScoringConfig
from .classifier import classify_status, risk_level
from .explainer import explain
from .recorder import PredictionRecorder
from .bulk import BulkRecompute, BulkResult
from .analytics import AnalyticsAggregator
from .sampling import generate_sample_data

__all__ = [
    "RiskScorer",
    "ScoringResult",
    "ScoringConfig",
    "classify_status",
    "risk_level",
    "explain",
    "PredictionRecorder",
    "BulkRecompute",
    "BulkResult",
    "AnalyticsAggregator",
    "generate_sample_data",
]
__version__ = "1.0.0"
