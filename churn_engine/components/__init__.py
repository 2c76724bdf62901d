"""Risk signal components for churn scoring."""

from .base import BaseSignal, RisingSignal, FallingSignal
from .recency import LoginRecencySignal
from .support import SupportVolumeSignal
from .frequency import LoginFrequencySignal
from .contract import ContractSignal
from .satisfaction import SatisfactionSignal
from .subscription import SubscriptionSignal
from .usage import UsageSignal

__all__ = [
    "BaseSignal",
    "RisingSignal",
    "FallingSignal",
    "LoginRecencySignal",
    "SupportVolumeSignal",
    "LoginFrequencySignal",
    "ContractSignal",
    "SatisfactionSignal",
    "SubscriptionSignal",
    "UsageSignal",
]
