"""
Sample data bootstrap.

Generates realistic customers for demos and tests. The scoring core
never depends on it; the API only seeds when explicitly configured
and the store is empty.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

import numpy as np
import pandas as pd

from .models import Customer, FeatureSet, utc_now
from .recorder import PredictionRecorder

logger = logging.getLogger(__name__)

NAMES = [
    "John Smith", "Sarah Johnson", "Michael Brown", "Emily Davis", "David Wilson",
    "Lisa Anderson", "Robert Taylor", "Jennifer Martinez", "Christopher Lee",
    "Amanda Thompson", "Matthew Garcia", "Jessica Rodriguez", "Daniel Hernandez",
    "Ashley Lopez", "James Gonzalez", "Michelle Perez", "Ryan Turner",
    "Stephanie Phillips", "Kevin Campbell", "Nicole Parker",
]

COMPANIES = [
    "TechCorp", "DataSystems", "CloudWorks", "FinanceBase", "RetailMax",
    "HealthTech", "EduSoft", "MediaGroup", "LogisticsPro", "ConsultingFirm",
    "InnovateLab", "GlobalSolutions", "SmartAnalytics", "FutureVision", "AlphaTech",
]


def generate_sample_data(n_customers: int = 100, seed: int = 42) -> pd.DataFrame:
    """
    Generate a raw scoring frame for testing.

    Distributions:
    - Days since last login: uniform 0-89
    - Support tickets: uniform 0-14
    - Login frequency: uniform 1-25
    - Contract length: uniform 6-35 months
    - Support satisfaction: uniform 4-9
    - Subscription value: uniform 500-9999
    - Product usage: uniform 0-99
    """
    rng = np.random.default_rng(seed)

    return pd.DataFrame(
        {
            "CUSTOMER_ID": [f"CUSTOMER_{i:04d}" for i in range(n_customers)],
            "DAYS_SINCE_LAST_LOGIN": rng.integers(0, 90, size=n_customers),
            "SUPPORT_TICKETS": rng.integers(0, 15, size=n_customers),
            "LOGIN_FREQUENCY": rng.integers(1, 26, size=n_customers),
            "CONTRACT_LENGTH": rng.integers(6, 36, size=n_customers),
            "SUPPORT_SATISFACTION": rng.integers(4, 10, size=n_customers),
            "SUBSCRIPTION_VALUE": rng.integers(500, 10000, size=n_customers),
            "PRODUCT_USAGE": rng.integers(0, 100, size=n_customers),
        }
    )


def generate_sample_customers(
    count: int = 100,
    seed: int = 42,
    now: Optional[datetime] = None,
) -> list[Customer]:
    """
    Generate unscored customers with creation dates over the last year.

    Risk and status are left at their defaults; callers must score the
    customers before storing them.
    """
    rng = np.random.default_rng(seed)
    now = now or utc_now()
    frame = generate_sample_data(count, seed)

    customers = []
    for i, row in frame.iterrows():
        name = NAMES[i % len(NAMES)]
        company = COMPANIES[i % len(COMPANIES)]
        if i >= len(NAMES):
            name = f"{name} {i // len(NAMES)}"
        created_at = now - timedelta(days=float(rng.uniform(0, 365)))
        days_since_login = int(row["DAYS_SINCE_LAST_LOGIN"])

        customers.append(Customer(
            name=name,
            email=f"{NAMES[i % len(NAMES)].lower().replace(' ', '.')}.{i}@{company.lower()}.com",
            company=company,
            subscription_value=float(row["SUBSCRIPTION_VALUE"]),
            contract_length=int(row["CONTRACT_LENGTH"]),
            support_tickets=int(row["SUPPORT_TICKETS"]),
            login_frequency=float(row["LOGIN_FREQUENCY"]),
            last_activity=now - timedelta(days=days_since_login),
            features=FeatureSet(
                days_since_last_login=days_since_login,
                avg_session_duration=int(rng.integers(10, 130)),
                total_transactions=int(rng.integers(5, 205)),
                avg_transaction_value=int(rng.integers(50, 550)),
                product_usage=float(row["PRODUCT_USAGE"]),
                support_satisfaction=float(row["SUPPORT_SATISFACTION"]),
                contract_renewal_history=int(rng.integers(0, 5)),
            ),
            created_at=created_at,
            updated_at=created_at,
        ))
    return customers


def seed_repository(
    recorder: PredictionRecorder,
    count: int = 100,
    seed: int = 42,
) -> int:
    """
    Populate an empty store with scored sample customers.

    Returns:
        Number of customers added (0 if the store was not empty)
    """
    repository = recorder.repository
    if repository.count() > 0:
        logger.info("Store not empty, skipping sample data seeding")
        return 0

    customers = generate_sample_customers(count, seed)
    for customer in customers:
        recorder.apply_score(customer)
        repository.add(customer)

    logger.info(f"Seeded store with {len(customers)} customers")
    return len(customers)
