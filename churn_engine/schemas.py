"""
Data schema definitions for the churn risk engine.

Uses Pandera for runtime validation of scoring frames so that a bad
population snapshot is rejected before any score is written.
"""

import pandera as pa
from pandera import Column, Check, DataFrameSchema


# Schema for scoring input data
SCORING_INPUT_SCHEMA = DataFrameSchema(
    {
        "CUSTOMER_ID": Column(
            str,
            nullable=False,
            unique=True,
            description="Unique customer identifier"
        ),
        "DAYS_SINCE_LAST_LOGIN": Column(
            float,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Days since the customer last logged in"
        ),
        "SUPPORT_TICKETS": Column(
            float,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Number of support tickets raised"
        ),
        "LOGIN_FREQUENCY": Column(
            float,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Logins per period"
        ),
        "CONTRACT_LENGTH": Column(
            float,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Contract length in months"
        ),
        "SUPPORT_SATISFACTION": Column(
            float,
            nullable=False,
            checks=[
                Check.greater_than_or_equal_to(0),
                Check.less_than_or_equal_to(10),
            ],
            description="Support satisfaction on a 1-10 scale"
        ),
        "SUBSCRIPTION_VALUE": Column(
            float,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Subscription value in currency units"
        ),
        "PRODUCT_USAGE": Column(
            float,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Product usage score (0-100)"
        ),
    },
    strict=False,  # Allow extra columns (name, email, created_at ...)
    coerce=True,   # Ints from the customer records become floats
    description="Schema for churn risk scoring input data"
)


# Schema for scoring output data
SCORING_OUTPUT_SCHEMA = DataFrameSchema(
    {
        "CUSTOMER_ID": Column(str, nullable=False),
        "CHURN_RISK": Column(
            float,
            nullable=False,
            checks=[
                Check.greater_than_or_equal_to(0.0),
                Check.less_than_or_equal_to(1.0),
            ]
        ),
        "STATUS": Column(
            str,
            nullable=False,
            checks=Check.isin(["active", "at_risk", "churned"])
        ),
        "RISK_LEVEL": Column(
            str,
            nullable=False,
            checks=Check.isin(["low", "medium", "high"])
        ),
    },
    strict=False,  # Allow signal columns
    description="Schema for churn risk scoring output data"
)

SchemaError = pa.errors.SchemaError
