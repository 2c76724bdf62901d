"""Customer, prediction and analytics endpoints."""

import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic.alias_generators import to_snake

from ...analytics import AnalyticsAggregator
from ...bulk import BulkRecompute
from ...customers import CustomerService
from ...models import (
    Customer,
    CustomerCreate,
    CustomerPage,
    CustomerUpdate,
    Interaction,
    PredictionOutcome,
    Status,
)
from ...recorder import PredictionRecorder

logger = logging.getLogger(__name__)
router = APIRouter()


def get_customers(request: Request) -> CustomerService:
    return request.app.state.customers


def get_recorder(request: Request) -> PredictionRecorder:
    return request.app.state.recorder


def get_bulk(request: Request) -> BulkRecompute:
    return request.app.state.bulk


def get_analytics(request: Request) -> AnalyticsAggregator:
    return request.app.state.analytics


@router.get("", response_model=CustomerPage)
def list_customers(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=500),
    status: Optional[Status] = None,
    search: Optional[str] = None,
    sort_by: str = Query("churn_risk", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("desc", alias="sortOrder"),
    customers: CustomerService = Depends(get_customers),
) -> CustomerPage:
    """Paged, filterable, sortable customer list."""
    return customers.list_page(
        page=page,
        limit=limit,
        status=status,
        search=search,
        sort_by=to_snake(sort_by),
        sort_order=sort_order,
    )


@router.get("/analytics/summary")
def analytics_summary(
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> dict:
    """Population counts, averages, risk histogram and monthly trend."""
    return analytics.summary()


@router.post("/predict/bulk")
def predict_bulk(bulk: BulkRecompute = Depends(get_bulk)) -> dict:
    """Re-score every customer that has not churned."""
    result = bulk.run()
    return {
        "message": "Bulk prediction completed" if result.succeeded
        else "Bulk prediction completed with failures",
        "processedCustomers": result.processed,
        "failedIds": result.failed_ids,
        "errors": result.errors,
    }


@router.get("/{customer_id}", response_model=Customer)
def get_customer(
    customer_id: str,
    customers: CustomerService = Depends(get_customers),
) -> Customer:
    return customers.get(customer_id)


@router.post("", response_model=Customer, status_code=201)
def create_customer(
    body: CustomerCreate,
    customers: CustomerService = Depends(get_customers),
) -> Customer:
    return customers.create(body)


@router.put("/{customer_id}", response_model=Customer)
def update_customer(
    customer_id: str,
    body: CustomerUpdate,
    customers: CustomerService = Depends(get_customers),
) -> Customer:
    return customers.update(customer_id, body)


@router.delete("/{customer_id}")
def delete_customer(
    customer_id: str,
    customers: CustomerService = Depends(get_customers),
) -> dict:
    customers.delete(customer_id)
    return {"message": "Customer deleted successfully"}


@router.post("/{customer_id}/predict", response_model=PredictionOutcome)
def predict_customer(
    customer_id: str,
    recorder: PredictionRecorder = Depends(get_recorder),
) -> PredictionOutcome:
    """Record a fresh prediction for one customer."""
    return recorder.record(customer_id)


@router.post("/{customer_id}/interactions", response_model=Customer, status_code=201)
def add_interaction(
    customer_id: str,
    body: Interaction,
    customers: CustomerService = Depends(get_customers),
) -> Customer:
    """Append an entry to the customer's contact log."""
    return customers.add_interaction(customer_id, body)
