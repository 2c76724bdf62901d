"""HTTP+JSON boundary for the churn risk engine."""

from .main import create_app

__all__ = ["create_app"]
