"""
Unit tests for individual risk signal components.
"""

import pandas as pd
import pytest

from churn_engine.components.recency import LoginRecencySignal
from churn_engine.components.support import SupportVolumeSignal
from churn_engine.components.frequency import LoginFrequencySignal
from churn_engine.components.contract import ContractSignal
from churn_engine.components.satisfaction import SatisfactionSignal
from churn_engine.components.subscription import SubscriptionSignal
from churn_engine.components.usage import UsageSignal


class TestLoginRecencySignal:
    """Tests for days-since-last-login scoring."""

    def test_contribution_scales_to_cap(self, default_config):
        """0 days = 0, 15 days = half weight, 30+ days = full weight."""
        signal = LoginRecencySignal(default_config)
        df = pd.DataFrame({"DAYS_SINCE_LAST_LOGIN": [0, 15, 30, 90]})
        scores = signal.score(df)

        assert scores.iloc[0] == 0.0
        assert scores.iloc[1] == pytest.approx(0.125)
        assert scores.iloc[2] == pytest.approx(0.25)
        assert scores.iloc[3] == pytest.approx(0.25)  # capped

    def test_missing_column_raises_error(self, default_config):
        """Should raise ValueError if DAYS_SINCE_LAST_LOGIN missing."""
        signal = LoginRecencySignal(default_config)
        df = pd.DataFrame({"OTHER_COLUMN": [1]})

        with pytest.raises(ValueError, match="DAYS_SINCE_LAST_LOGIN"):
            signal.score(df)


class TestSupportVolumeSignal:
    """Tests for support ticket scoring."""

    def test_tickets_capped_at_ten(self, default_config):
        signal = SupportVolumeSignal(default_config)
        df = pd.DataFrame({"SUPPORT_TICKETS": [0, 5, 10, 50]})
        scores = signal.score(df)

        assert scores.iloc[0] == 0.0
        assert scores.iloc[1] == pytest.approx(0.10)
        assert scores.iloc[2] == pytest.approx(0.20)
        assert scores.iloc[3] == pytest.approx(0.20)  # capped


class TestLoginFrequencySignal:
    """Tests for login frequency scoring (low frequency = risk)."""

    def test_low_frequency_highest_risk(self, default_config):
        signal = LoginFrequencySignal(default_config)
        df = pd.DataFrame({"LOGIN_FREQUENCY": [0, 15, 30, 60]})
        scores = signal.score(df)

        assert scores.iloc[0] == pytest.approx(0.15)  # never logs in
        assert scores.iloc[1] == pytest.approx(0.075)
        assert scores.iloc[2] == 0.0                  # daily user
        assert scores.iloc[3] == 0.0                  # beyond cap


class TestContractSignal:
    """Tests for contract length scoring (short contract = risk)."""

    def test_three_year_contract_no_risk(self, default_config):
        signal = ContractSignal(default_config)
        df = pd.DataFrame({"CONTRACT_LENGTH": [0, 1, 18, 36, 48]})
        scores = signal.score(df)

        assert scores.iloc[0] == pytest.approx(0.10)
        assert scores.iloc[1] == pytest.approx(0.10 * (1 - 1 / 36))
        assert scores.iloc[2] == pytest.approx(0.05)
        assert scores.iloc[3] == 0.0
        assert scores.iloc[4] == 0.0


class TestSatisfactionSignal:
    """Tests for support satisfaction scoring."""

    def test_satisfaction_scale(self, default_config):
        signal = SatisfactionSignal(default_config)
        df = pd.DataFrame({"SUPPORT_SATISFACTION": [1, 5, 10]})
        scores = signal.score(df)

        assert scores.iloc[0] == pytest.approx(0.135)
        assert scores.iloc[1] == pytest.approx(0.075)
        assert scores.iloc[2] == 0.0


class TestSubscriptionSignal:
    """Tests for subscription value scoring."""

    def test_high_value_no_risk(self, default_config):
        signal = SubscriptionSignal(default_config)
        df = pd.DataFrame({"SUBSCRIPTION_VALUE": [0, 2500, 10000, 25000]})
        scores = signal.score(df)

        assert scores.iloc[0] == pytest.approx(0.10)
        assert scores.iloc[1] == pytest.approx(0.075)
        assert scores.iloc[2] == 0.0
        assert scores.iloc[3] == 0.0


class TestUsageSignal:
    """Tests for product usage scoring."""

    def test_unused_product_full_weight(self, default_config):
        signal = UsageSignal(default_config)
        df = pd.DataFrame({"PRODUCT_USAGE": [0, 50, 100]})
        scores = signal.score(df)

        assert scores.iloc[0] == pytest.approx(0.05)
        assert scores.iloc[1] == pytest.approx(0.025)
        assert scores.iloc[2] == 0.0


class TestContributionBounds:
    """Every signal stays within [0, weight]."""

    @pytest.mark.parametrize("signal_cls", [
        LoginRecencySignal,
        SupportVolumeSignal,
        LoginFrequencySignal,
        ContractSignal,
        SatisfactionSignal,
        SubscriptionSignal,
        UsageSignal,
    ])
    def test_never_negative_never_above_weight(self, default_config, signal_cls):
        signal = signal_cls(default_config)
        df = pd.DataFrame({signal.column: [0, 0.5, 1, 10, 100, 1e6]})
        scores = signal.score(df)

        assert (scores >= 0).all()
        assert (scores <= signal.weight + 1e-12).all()
