"""Calculator API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CalculatorError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calculator.api.error_handlers import register_error_handlers
from calculator.api.routes import (
    health, keypad, calculator_sessions, calculator_events,
)
from calculator.config import get_settings
from calculator.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Calculator API started")
    yield
    logger.info("Calculator API shutting down")


app = FastAPI(
    title="Calculator API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(keypad.router)
app.include_router(calculator_sessions.router)
app.include_router(calculator_events.router)

register_error_handlers(app)
