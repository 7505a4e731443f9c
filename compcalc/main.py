"""FastAPI application instance and startup hooks."""
from __future__ import annotations

from fastapi import FastAPI

from compcalc.core import configure_logging, get_settings
from compcalc.core.logger import get_logger, shutdown_logging
from compcalc.routers import compensation_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    app = FastAPI(title="Compensation Calculator", version="0.1.0")
    app.include_router(compensation_router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.on_event("shutdown")
    def close_log_files() -> None:
        logger.info("Shutting down, closing log handlers")
        shutdown_logging()

    logger.info(
        "FastAPI application initialised (goal target=%s, win rate=%s)",
        settings.goal.target_arr,
        settings.goal.assumed_win_rate,
    )
    return app


app = create_app()
