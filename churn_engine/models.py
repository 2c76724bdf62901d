"""
Customer and prediction data models.

Python attributes are snake_case; the JSON wire shape uses camelCase
aliases (``subscriptionValue``, ``churnRisk`` ...). Both are accepted
on input.
"""

import uuid
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Status = Literal["active", "at_risk", "churned"]
RiskLevel = Literal["low", "medium", "high"]
InteractionType = Literal["email", "call", "meeting", "support"]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_customer_id() -> str:
    return uuid.uuid4().hex


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class FeatureSet(CamelModel):
    """Behavioral signals describing how a customer uses the product."""

    days_since_last_login: float = Field(default=0, ge=0)
    avg_session_duration: float = Field(default=0, ge=0)
    total_transactions: int = Field(default=0, ge=0)
    avg_transaction_value: float = Field(default=0, ge=0)
    product_usage: float = Field(default=0, ge=0, le=100)
    support_satisfaction: float = Field(default=5, ge=1, le=10)
    contract_renewal_history: int = Field(default=0, ge=0)


class FeatureSetUpdate(CamelModel):
    """Partial feature update; unset fields keep their current value."""

    days_since_last_login: Optional[float] = Field(default=None, ge=0)
    avg_session_duration: Optional[float] = Field(default=None, ge=0)
    total_transactions: Optional[int] = Field(default=None, ge=0)
    avg_transaction_value: Optional[float] = Field(default=None, ge=0)
    product_usage: Optional[float] = Field(default=None, ge=0, le=100)
    support_satisfaction: Optional[float] = Field(default=None, ge=1, le=10)
    contract_renewal_history: Optional[int] = Field(default=None, ge=0)


class PredictionRecord(CamelModel):
    """One immutable entry in a customer's prediction history."""

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(default_factory=utc_now)
    churn_probability: float = Field(ge=0, le=1)
    risk_level: RiskLevel
    factors: tuple[str, ...] = ()
    model_version: str = "1.0"


class Interaction(CamelModel):
    """Contact history entry. Not used for scoring."""

    date: datetime = Field(default_factory=utc_now)
    type: InteractionType
    description: Optional[str] = None
    outcome: Optional[str] = None


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken as UTC so stored values stay comparable
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    local, _, domain = value.partition("@")
    if not local or not domain:
        raise ValueError("email must be a valid address")
    return value


class CustomerBase(CamelModel):
    """Fields a caller may supply when creating a customer."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    company: str = Field(min_length=1)
    subscription_value: float = Field(ge=0)
    contract_length: int = Field(ge=1, description="Contract length in months")
    support_tickets: int = Field(default=0, ge=0)
    login_frequency: float = Field(default=0, ge=0)
    last_activity: datetime = Field(default_factory=utc_now)
    features: FeatureSet = Field(default_factory=FeatureSet)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)

    @field_validator("last_activity")
    @classmethod
    def last_activity_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


class CustomerCreate(CustomerBase):
    """Request body for creating a customer."""

    interactions: list[Interaction] = Field(default_factory=list)


class CustomerUpdate(CamelModel):
    """Request body for a partial customer update."""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    company: Optional[str] = Field(default=None, min_length=1)
    subscription_value: Optional[float] = Field(default=None, ge=0)
    contract_length: Optional[int] = Field(default=None, ge=1)
    support_tickets: Optional[int] = Field(default=None, ge=0)
    login_frequency: Optional[float] = Field(default=None, ge=0)
    last_activity: Optional[datetime] = None
    features: Optional[FeatureSetUpdate] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _normalize_email(v)

    @field_validator("last_activity")
    @classmethod
    def last_activity_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return None if v is None else _as_utc(v)


# Fields whose change requires re-scoring
SCORED_FIELDS = frozenset({
    "subscription_value",
    "contract_length",
    "support_tickets",
    "login_frequency",
    "features",
})


class Customer(CustomerBase):
    """A subscriber record with derived risk state and history."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_customer_id)
    churn_risk: float = Field(default=0.0, ge=0, le=1)
    status: Status = "active"
    predictions: list[PredictionRecord] = Field(default_factory=list)
    interactions: list[Interaction] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class CustomerSummary(CamelModel):
    """Current risk state of a customer."""

    id: str
    churn_risk: float
    status: Status


class PredictionOutcome(CamelModel):
    """Result of recording one prediction."""

    prediction: PredictionRecord
    customer: CustomerSummary


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class CustomerPage(CamelModel):
    customers: list[Customer]
    pagination: Pagination
