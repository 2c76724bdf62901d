"""
Customer lifecycle operations.

Every path that changes a scored field re-scores the customer through
``PredictionRecorder.apply_score`` before the write is persisted.
"""

import logging
from typing import Optional

import pydantic

from .errors import ValidationError
from .models import (
    SCORED_FIELDS,
    Customer,
    CustomerCreate,
    CustomerPage,
    CustomerUpdate,
    Interaction,
    utc_now,
)
from .recorder import PredictionRecorder

logger = logging.getLogger(__name__)


def describe_validation_error(error) -> str:
    """One line naming each violated field of a pydantic or FastAPI error."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"] if p not in ("body", "query", "path"))
        parts.append(f"{loc}: {item['msg']}" if loc else item["msg"])
    return "; ".join(parts)


class CustomerService:
    """CRUD over the customer repository with explicit re-scoring."""

    def __init__(self, recorder: PredictionRecorder):
        self.recorder = recorder
        self.repository = recorder.repository

    def create(self, data: CustomerCreate) -> Customer:
        """
        Create and score a new customer.

        Raises:
            ConflictError: If the email is already registered
        """
        customer = Customer(**data.model_dump())
        self.recorder.apply_score(customer)
        saved = self.repository.add(customer)
        logger.info(f"Created customer {saved.id} status={saved.status}")
        return saved

    def get(self, customer_id: str) -> Customer:
        return self.repository.get(customer_id)

    def list_page(
        self,
        page: int = 1,
        limit: int = 50,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort_by: str = "churn_risk",
        sort_order: str = "desc",
    ) -> CustomerPage:
        try:
            return self.repository.list_page(
                page=page,
                limit=limit,
                status=status,
                search=search,
                sort_by=sort_by,
                sort_order=sort_order,
            )
        except ValueError as e:
            raise ValidationError(str(e), field="sortBy") from e

    def update(self, customer_id: str, data: CustomerUpdate) -> Customer:
        """
        Apply a partial update, re-scoring if a scored field changed.

        Raises:
            NotFoundError: If the customer id does not resolve
            ValidationError: If the merged record is invalid
            ConflictError: If the new email belongs to another customer
        """
        customer = self.repository.get(customer_id)
        changes = data.model_dump(exclude_unset=True)

        features = changes.pop("features", None)
        if features:
            merged = customer.features.model_dump()
            merged.update({k: v for k, v in features.items() if v is not None})
            changes["features"] = merged

        try:
            for field_name, value in changes.items():
                if value is None:
                    raise ValidationError(f"{field_name} cannot be null", field=field_name)
                setattr(customer, field_name, value)
        except pydantic.ValidationError as e:
            raise ValidationError(describe_validation_error(e)) from e

        if SCORED_FIELDS & changes.keys():
            self.recorder.apply_score(customer)
        customer.updated_at = utc_now()

        saved = self.repository.save(customer)
        logger.info(f"Updated customer {saved.id} fields={sorted(changes)}")
        return saved

    def delete(self, customer_id: str) -> None:
        self.repository.delete(customer_id)
        logger.info(f"Deleted customer {customer_id}")

    def add_interaction(self, customer_id: str, interaction: Interaction) -> Customer:
        """Append a contact log entry. Does not affect scoring."""
        customer = self.repository.get(customer_id)
        customer.interactions.append(interaction)
        customer.updated_at = utc_now()
        return self.repository.save(customer)
