from __future__ import annotations

import logging

from fastapi import FastAPI

from app.api.routes import router as api_router
from app.config import Settings, load_settings
from app.observability.metrics import Metrics
from app.parsers.loe_schedule_parser import LoeScheduleParser
from app.pipeline.status_service import StatusService
from app.providers.registry import build_provider


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    metrics = Metrics()
    status_service = StatusService(
        settings=app_settings,
        provider=build_provider(app_settings),
        parser=LoeScheduleParser(),
        metrics=metrics,
    )

    app = FastAPI(title="loe-outage-status", version="0.1.0")
    app.state.settings = app_settings
    app.state.metrics = metrics
    app.state.status_service = status_service

    app.include_router(api_router)
    return app


app = create_app()
