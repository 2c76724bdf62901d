"""
Pytest fixtures for churn risk engine tests.
"""

from datetime import datetime, timezone

import pandas as pd
import pytest

# Add package to path
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from churn_engine.config import ScoringConfig
from churn_engine.models import Customer, FeatureSet
from churn_engine.recorder import PredictionRecorder
from churn_engine.repository import InMemoryCustomerRepository
from churn_engine.sampling import generate_sample_data
from churn_engine.scorer import RiskScorer


FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def default_config():
    """Default scoring configuration."""
    return ScoringConfig()


@pytest.fixture
def scorer(default_config):
    """RiskScorer with default config."""
    return RiskScorer(default_config)


@pytest.fixture
def sample_data():
    """100 sample customers as a raw scoring frame."""
    return generate_sample_data(n_customers=100, seed=42)


@pytest.fixture
def repository():
    """Empty in-memory customer store."""
    return InMemoryCustomerRepository()


@pytest.fixture
def recorder(repository, scorer):
    """PredictionRecorder over the in-memory store with a fixed clock."""
    return PredictionRecorder(repository, scorer, clock=lambda: FIXED_NOW)


@pytest.fixture
def make_customer():
    """Factory for at_risk customers (risk ~0.64); overrides go to Customer or FeatureSet."""
    feature_fields = set(FeatureSet.model_fields)
    counter = {"n": 0}

    def _make(**overrides) -> Customer:
        counter["n"] += 1
        features = {k: overrides.pop(k) for k in list(overrides) if k in feature_fields}
        data = {
            "name": f"Customer {counter['n']}",
            "email": f"customer{counter['n']}@example.com",
            "company": "ExampleCo",
            "subscription_value": 8000,
            "contract_length": 24,
            "support_tickets": 1,
            "login_frequency": 25,
            "features": FeatureSet(**{
                "days_since_last_login": 2,
                "product_usage": 80,
                "support_satisfaction": 9,
                **features,
            }),
        }
        data.update(overrides)
        return Customer(**data)

    return _make


@pytest.fixture
def healthy_row():
    """Scoring row where every signal contributes zero."""
    return {
        "CUSTOMER_ID": "HEALTHY",
        "DAYS_SINCE_LAST_LOGIN": 0,
        "SUPPORT_TICKETS": 0,
        "LOGIN_FREQUENCY": 30,
        "CONTRACT_LENGTH": 36,
        "SUPPORT_SATISFACTION": 10,
        "SUBSCRIPTION_VALUE": 10000,
        "PRODUCT_USAGE": 100,
    }


@pytest.fixture
def worst_row():
    """Scoring row where every signal is maxed out."""
    return {
        "CUSTOMER_ID": "WORST",
        "DAYS_SINCE_LAST_LOGIN": 30,
        "SUPPORT_TICKETS": 10,
        "LOGIN_FREQUENCY": 0,
        "CONTRACT_LENGTH": 0,
        "SUPPORT_SATISFACTION": 1,
        "SUBSCRIPTION_VALUE": 0,
        "PRODUCT_USAGE": 0,
    }


@pytest.fixture
def edge_cases(healthy_row, worst_row):
    """Specific edge cases for testing boundary conditions."""
    return pd.DataFrame([
        healthy_row,
        worst_row,
        # Values far beyond every cap
        {
            "CUSTOMER_ID": "EDGE_LARGE",
            "DAYS_SINCE_LAST_LOGIN": 10_000,
            "SUPPORT_TICKETS": 500,
            "LOGIN_FREQUENCY": 1_000,
            "CONTRACT_LENGTH": 240,
            "SUPPORT_SATISFACTION": 10,
            "SUBSCRIPTION_VALUE": 1_000_000,
            "PRODUCT_USAGE": 100,
        },
        # Half way on every signal
        {
            "CUSTOMER_ID": "EDGE_MIDDLE",
            "DAYS_SINCE_LAST_LOGIN": 15,
            "SUPPORT_TICKETS": 5,
            "LOGIN_FREQUENCY": 15,
            "CONTRACT_LENGTH": 18,
            "SUPPORT_SATISFACTION": 5,
            "SUBSCRIPTION_VALUE": 5000,
            "PRODUCT_USAGE": 50,
        },
    ])
