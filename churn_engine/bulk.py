"""
Bulk re-scoring of the customer population.

Every non-churned customer gets a fresh prediction record (with an
empty factor list). Updates are independent: a failure for one
customer is logged and reported, never rolled back into the others.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .classifier import CHURNED
from .models import Customer
from .recorder import PredictionRecorder

logger = logging.getLogger(__name__)


@dataclass
class BulkResult:
    """Outcome of a bulk recompute."""

    processed: int = 0
    failed_ids: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return not self.failed_ids

    def summary(self) -> str:
        """Human-readable summary."""
        return (
            f"Bulk prediction: {self.processed} processed, "
            f"{len(self.failed_ids)} failed"
        )


class BulkRecompute:
    """
    Apply PredictionRecorder to every customer that has not churned.

    Usage:
        bulk = BulkRecompute(recorder, max_workers=4)
        result = bulk.run()
        print(result.summary())
    """

    def __init__(self, recorder: PredictionRecorder, max_workers: int = 4):
        """
        Args:
            recorder: PredictionRecorder bound to the storage collaborator
            max_workers: Thread pool size. 1 runs sequentially.
        """
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.recorder = recorder
        self.max_workers = max_workers

    @property
    def repository(self):
        return self.recorder.repository

    def eligible(self) -> list[Customer]:
        """Customers the bulk path will re-score."""
        return self.repository.find(exclude_status=CHURNED)

    def _recompute_one(self, customer: Customer) -> tuple[str, Exception | None]:
        try:
            self.recorder.record_customer(customer, factors=[])
        except Exception as e:
            logger.warning(f"Bulk prediction failed for {customer.id}: {e}")
            return customer.id, e
        return customer.id, None

    def run(self) -> BulkResult:
        """
        Re-score all eligible customers.

        Returns:
            BulkResult with the number processed and any failed ids
        """
        customers = self.eligible()
        result = BulkResult()

        if self.max_workers == 1:
            outcomes = [self._recompute_one(c) for c in customers]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                outcomes = list(pool.map(self._recompute_one, customers))

        for customer_id, error in outcomes:
            if error is None:
                result.processed += 1
            else:
                result.failed_ids.append(customer_id)
                result.errors[customer_id] = str(error)

        logger.info(result.summary())
        return result
