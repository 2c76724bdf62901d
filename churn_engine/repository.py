"""
Customer storage collaborator.

The engine talks to storage only through ``CustomerRepository``.
``InMemoryCustomerRepository`` is the default implementation: a
dict guarded by a lock, holding deep copies so callers never share
mutable state with the store. Concurrent writes to the same customer
are last-write-wins.
"""

import logging
import math
import threading
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .errors import ConflictError, NotFoundError
from .models import Customer, CustomerPage, Pagination

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "churn_risk",
    "name",
    "email",
    "company",
    "subscription_value",
    "contract_length",
    "support_tickets",
    "login_frequency",
    "last_activity",
    "created_at",
    "updated_at",
}


class CustomerRepository(ABC):
    """Storage interface used by the services."""

    @abstractmethod
    def get(self, customer_id: str) -> Customer:
        """Load a customer or raise NotFoundError."""
        pass

    @abstractmethod
    def add(self, customer: Customer) -> Customer:
        """Insert a new customer; raise ConflictError on duplicate email."""
        pass

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """Replace an existing customer; raise NotFoundError if absent."""
        pass

    @abstractmethod
    def delete(self, customer_id: str) -> None:
        """Remove a customer or raise NotFoundError."""
        pass

    @abstractmethod
    def all(self) -> list[Customer]:
        """Snapshot of every customer."""
        pass

    def find(self, exclude_status: Optional[str] = None) -> list[Customer]:
        """Customers whose status differs from ``exclude_status``."""
        return [c for c in self.all() if c.status != exclude_status]

    def count(self) -> int:
        return len(self.all())

    def list_page(
        self,
        page: int = 1,
        limit: int = 50,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort_by: str = "churn_risk",
        sort_order: str = "desc",
    ) -> CustomerPage:
        """
        Filtered, sorted page of customers.

        Args:
            page: 1-based page number
            limit: Page size
            status: Only customers with this status
            search: Case-insensitive substring of name, email or company
            sort_by: Customer field to sort on
            sort_order: "asc" or "desc"

        Returns:
            CustomerPage with pagination metadata
        """
        if sort_by not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by {sort_by!r}")

        customers = _filter(self.all(), status, search)
        customers.sort(
            key=lambda c: getattr(c, sort_by),
            reverse=(sort_order == "desc"),
        )

        total = len(customers)
        start = (page - 1) * limit
        return CustomerPage(
            customers=customers[start:start + limit],
            pagination=Pagination(
                page=page,
                limit=limit,
                total=total,
                pages=math.ceil(total / limit),
            ),
        )


def _filter(
    customers: Iterable[Customer],
    status: Optional[str],
    search: Optional[str],
) -> list[Customer]:
    result = []
    needle = search.lower() if search else None
    for customer in customers:
        if status and customer.status != status:
            continue
        if needle and not any(
            needle in value.lower()
            for value in (customer.name, customer.email, customer.company)
        ):
            continue
        result.append(customer)
    return result


class InMemoryCustomerRepository(CustomerRepository):
    """
    Thread-safe in-process customer store.

    Args:
        history_limit: Keep at most this many prediction records per
            customer (newest kept). None keeps the full history.
    """

    def __init__(self, history_limit: Optional[int] = None):
        if history_limit is not None and history_limit < 1:
            raise ValueError("history_limit must be >= 1")
        self.history_limit = history_limit
        self._customers: dict[str, Customer] = {}
        self._emails: dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, customer_id: str) -> Customer:
        with self._lock:
            customer = self._customers.get(customer_id)
            if customer is None:
                raise NotFoundError()
            return customer.model_copy(deep=True)

    def add(self, customer: Customer) -> Customer:
        with self._lock:
            if customer.id in self._customers:
                raise ConflictError(f"Customer {customer.id} already exists")
            if customer.email in self._emails:
                raise ConflictError()
            stored = self._store(customer)
            logger.debug(f"Added customer {customer.id}")
            return stored.model_copy(deep=True)

    def save(self, customer: Customer) -> Customer:
        with self._lock:
            current = self._customers.get(customer.id)
            if current is None:
                raise NotFoundError()
            owner = self._emails.get(customer.email)
            if owner is not None and owner != customer.id:
                raise ConflictError()
            del self._emails[current.email]
            stored = self._store(customer)
            return stored.model_copy(deep=True)

    def delete(self, customer_id: str) -> None:
        with self._lock:
            customer = self._customers.pop(customer_id, None)
            if customer is None:
                raise NotFoundError()
            del self._emails[customer.email]
            logger.debug(f"Deleted customer {customer_id}")

    def all(self) -> list[Customer]:
        with self._lock:
            return [c.model_copy(deep=True) for c in self._customers.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._customers)

    def _store(self, customer: Customer) -> Customer:
        stored = customer.model_copy(deep=True)
        if self.history_limit is not None and len(stored.predictions) > self.history_limit:
            stored.predictions = stored.predictions[-self.history_limit:]
        self._customers[stored.id] = stored
        self._emails[stored.email] = stored.id
        return stored
