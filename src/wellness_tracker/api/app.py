"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import Depends, FastAPI

from wellness_tracker.api.auth import require_api_token
from wellness_tracker.api.catalog import router as catalog_router
from wellness_tracker.api.errors import register_error_handlers
from wellness_tracker.api.models import MetricsIn
from wellness_tracker.api.users import router as users_router
from wellness_tracker.app_logging import configure_logging
from wellness_tracker.containers import AppContainer
from wellness_tracker.domain.profiles import (
    ActivityLevel,
    BodyMetrics,
    Gender,
    Objective,
)
from wellness_tracker.services.metrics import compute_metrics


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting wellness tracker (%s)", app.state.container.settings.environment
        )
        yield
        logger.info("Stopping wellness tracker")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    register_error_handlers(app)

    app.include_router(catalog_router)
    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/metrics", dependencies=[Depends(require_api_token)])
    async def metrics(body: MetricsIn) -> dict[str, object]:
        """Derive BMR, TDEE, BMI and a calorie goal from biometrics."""
        derived = compute_metrics(
            BodyMetrics(
                weight_kg=body.weight_kg,
                height_cm=body.height_cm,
                age=body.age,
                gender=Gender.parse(body.gender),
                activity_level=ActivityLevel.parse(body.activity_level),
                objective=Objective.parse(body.objective),
            )
        )
        return asdict(derived)

    return app
