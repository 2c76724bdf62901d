"""
Scoring configuration for the churn risk engine.

All weights, caps and status cutoffs are defined here for easy tuning.
The score is a fixed linear rule:

    risk = clamp(base_risk + sum(weight * normalized_signal), 0, 1)

where every normalized signal lies in [0, 1] and is oriented so that a
larger value means more risk.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict

import yaml


@dataclass
class ScoringConfig:
    """
    Configuration for all scoring signals.

    Max contribution per signal (default weights):
    - Login Recency: 0-0.25
    - Support Volume: 0-0.20
    - Login Frequency: 0-0.15
    - Contract Length: 0-0.10
    - Support Satisfaction: 0-0.15
    - Subscription Value: 0-0.10
    - Product Usage: 0-0.05
    """

    # === Base risk ===
    base_risk: float = 0.5

    # === Signal weights ===
    weights: Dict[str, float] = field(default_factory=lambda: {
        "login_recency": 0.25,      # days since last login
        "support_volume": 0.20,     # support ticket count
        "login_frequency": 0.15,    # low frequency = risk
        "contract": 0.10,           # short contract = risk
        "satisfaction": 0.15,       # low satisfaction = risk
        "subscription": 0.10,       # low value = risk
        "usage": 0.05,              # low product usage = risk
    })

    # === Normalization caps ===
    # Each raw value is divided by its cap and the ratio capped at 1
    caps: Dict[str, float] = field(default_factory=lambda: {
        "login_recency": 30,        # days
        "support_volume": 10,       # tickets
        "login_frequency": 30,      # logins
        "contract": 36,             # months
        "satisfaction": 10,         # 1-10 scale
        "subscription": 10000,      # currency
        "usage": 100,               # 0-100 score
    })

    # === Status cutoffs ===
    # score < at_risk_cutoff -> active / low
    # at_risk_cutoff <= score < churn_cutoff -> at_risk / medium
    # score >= churn_cutoff -> churned / high
    at_risk_cutoff: float = 0.3
    churn_cutoff: float = 0.7

    # === Metadata ===
    min_score: float = 0.0
    max_score: float = 1.0
    model_version: str = "1.0"

    def __post_init__(self):
        if not self.at_risk_cutoff < self.churn_cutoff:
            raise ValueError(
                f"at_risk_cutoff ({self.at_risk_cutoff}) must be < "
                f"churn_cutoff ({self.churn_cutoff})"
            )
        missing = set(self.weights) - set(self.caps)
        if missing:
            raise ValueError(f"Missing caps for signals: {missing}")

    def get_weight(self, signal: str) -> float:
        """Weight for a signal (0 for unknown signals)."""
        return self.weights.get(signal, 0.0)

    def get_cap(self, signal: str) -> float:
        """Normalization cap for a signal."""
        return self.caps[signal]

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ScoringConfig":
        """Load configuration from YAML file."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=False)


# Default configuration instance
DEFAULT_CONFIG = ScoringConfig()
