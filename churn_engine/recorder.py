"""
Prediction recording.

``PredictionRecorder`` is the only component that writes a customer's
``churn_risk`` and ``status``. Create and update paths call
``apply_score`` explicitly before persisting; the predict endpoints
call ``record`` to also append a history entry.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from .classifier import classify_status, risk_level
from .explainer import explain
from .models import (
    Customer,
    CustomerSummary,
    PredictionOutcome,
    PredictionRecord,
    utc_now,
)
from .repository import CustomerRepository
from .scorer import RiskScorer

logger = logging.getLogger(__name__)


class PredictionRecorder:
    """
    Score, classify, explain and persist one customer at a time.

    Usage:
        recorder = PredictionRecorder(repository)
        outcome = recorder.record(customer_id)
        print(outcome.prediction.risk_level, outcome.customer.status)
    """

    def __init__(
        self,
        repository: CustomerRepository,
        scorer: Optional[RiskScorer] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Args:
            repository: Storage collaborator
            scorer: RiskScorer instance. Uses default config if None.
            clock: Timestamp source for prediction records
        """
        self.repository = repository
        self.scorer = scorer or RiskScorer()
        self.clock = clock

    @property
    def config(self):
        return self.scorer.config

    def apply_score(self, customer: Customer) -> float:
        """
        Recompute risk and status on a customer in place.

        Does not persist and does not touch the prediction history.

        Returns:
            The new risk score
        """
        risk = self.scorer.score_customer(customer)
        customer.churn_risk = risk
        customer.status = classify_status(risk, self.config)
        return risk

    def record(self, customer_id: str) -> PredictionOutcome:
        """
        Record a fresh prediction for a stored customer.

        Args:
            customer_id: Customer to score

        Returns:
            PredictionOutcome with the new record and customer summary

        Raises:
            NotFoundError: If the customer id does not resolve
        """
        customer = self.repository.get(customer_id)
        return self.record_customer(customer, factors=explain(customer))

    def record_customer(
        self,
        customer: Customer,
        factors: Optional[list[str]] = None,
    ) -> PredictionOutcome:
        """
        Record a prediction against an already loaded customer.

        Args:
            customer: Customer as loaded from the repository
            factors: Factor list for the record. Empty if None.

        Returns:
            PredictionOutcome with the new record and customer summary
        """
        now = self.clock()
        risk = self.apply_score(customer)
        prediction = PredictionRecord(
            date=now,
            churn_probability=risk,
            risk_level=risk_level(risk, self.config),
            factors=tuple(factors or ()),
            model_version=self.config.model_version,
        )
        customer.predictions.append(prediction)
        customer.updated_at = now
        saved = self.repository.save(customer)

        logger.info(
            f"Recorded prediction for {saved.id}: "
            f"risk={risk:.3f} status={saved.status}"
        )
        return PredictionOutcome(
            prediction=prediction,
            customer=CustomerSummary(
                id=saved.id,
                churn_risk=saved.churn_risk,
                status=saved.status,
            ),
        )
