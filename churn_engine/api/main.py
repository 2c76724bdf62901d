"""Churn risk engine FastAPI application."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..analytics import AnalyticsAggregator
from ..bulk import BulkRecompute
from ..config import ScoringConfig
from ..customers import CustomerService, describe_validation_error
from ..errors import ChurnEngineError
from ..recorder import PredictionRecorder
from ..repository import CustomerRepository, InMemoryCustomerRepository
from ..sampling import seed_repository
from ..schemas import SchemaError
from ..scorer import RiskScorer
from .config import Settings
from .routes import customers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_scoring_config(settings: Settings) -> ScoringConfig:
    if settings.scoring_config_path:
        logger.info(f"Loading scoring config from {settings.scoring_config_path}")
        return ScoringConfig.from_yaml(settings.scoring_config_path)
    return ScoringConfig()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Optional sample data bootstrap on startup."""
    settings: Settings = app.state.settings
    if settings.seed_sample_data:
        seed_repository(app.state.recorder, count=settings.seed_count)
    logger.info(
        f"Churn engine started (model version {app.state.recorder.config.model_version})"
    )
    yield


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Map the exception taxonomy onto HTTP responses."""

    @app.exception_handler(ChurnEngineError)
    async def handle_engine_error(request: Request, exc: ChurnEngineError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path}: {exc.message}")
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return _error_response(400, describe_validation_error(exc))

    @app.exception_handler(SchemaError)
    async def handle_schema_error(request: Request, exc: SchemaError):
        return _error_response(400, f"Invalid scoring input: {exc}")

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)},
        )


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[CustomerRepository] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Service settings. Read from CHURN_* env vars if None.
        repository: Storage collaborator. In-memory store if None.
    """
    if settings is None:
        settings = Settings()
    configure_logging(settings.log_level)

    if repository is None:
        repository = InMemoryCustomerRepository(history_limit=settings.history_limit)
    recorder = PredictionRecorder(repository, RiskScorer(load_scoring_config(settings)))

    app = FastAPI(
        title="Churn Risk Engine",
        description="Customer churn risk scoring, prediction history and analytics",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.started_at = time.monotonic()
    app.state.repository = repository
    app.state.recorder = recorder
    app.state.customers = CustomerService(recorder)
    app.state.bulk = BulkRecompute(recorder, max_workers=settings.bulk_max_workers)
    app.state.analytics = AnalyticsAggregator(
        repository, sample_size=settings.analytics_sample_size
    )

    register_error_handlers(app)
    app.include_router(customers.router, prefix="/api/customers", tags=["customers"])

    @app.get("/api/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - app.state.started_at, 3),
            "modelVersion": recorder.config.model_version,
        }

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "churn_engine.api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
