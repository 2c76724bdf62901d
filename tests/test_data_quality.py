"""
Data quality and schema validation tests.
"""

import pandas as pd
import pandera as pa
import pytest

from churn_engine import RiskScorer
from churn_engine.schemas import SCORING_INPUT_SCHEMA, SCORING_OUTPUT_SCHEMA


class TestDataQuality:
    """Schema validation of scoring frames."""

    def test_sample_data_matches_input_schema(self, sample_data):
        validated_df = SCORING_INPUT_SCHEMA.validate(sample_data)
        assert len(validated_df) == len(sample_data)

    def test_scorer_output_matches_output_schema(self, scorer, sample_data):
        result = scorer.score(sample_data)

        validated_df = SCORING_OUTPUT_SCHEMA.validate(result.df)
        assert len(validated_df) == len(sample_data)

    def test_negative_values_rejected(self, scorer, healthy_row):
        bad_df = pd.DataFrame([{**healthy_row, "SUBSCRIPTION_VALUE": -1}])

        with pytest.raises(pa.errors.SchemaError):
            scorer.score(bad_df)

    def test_satisfaction_above_scale_rejected(self, scorer, healthy_row):
        bad_df = pd.DataFrame([{**healthy_row, "SUPPORT_SATISFACTION": 11}])

        with pytest.raises(pa.errors.SchemaError):
            scorer.score(bad_df)

    def test_duplicate_ids_rejected(self, scorer, healthy_row):
        bad_df = pd.DataFrame([healthy_row, healthy_row])

        with pytest.raises(pa.errors.SchemaError):
            scorer.score(bad_df)

    def test_nulls_rejected(self, scorer, healthy_row):
        bad_df = pd.DataFrame([{**healthy_row, "LOGIN_FREQUENCY": None}])

        with pytest.raises(pa.errors.SchemaError):
            scorer.score(bad_df)

    def test_extra_columns_allowed(self, scorer, healthy_row):
        df = pd.DataFrame([{**healthy_row, "COMPANY": "ExampleCo"}])
        result = scorer.score(df)

        assert result.df["COMPANY"].iloc[0] == "ExampleCo"
