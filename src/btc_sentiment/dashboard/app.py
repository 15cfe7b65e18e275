"""FastAPI application factory for the sentiment classifier API."""

from typing import Any

from fastapi import FastAPI

from btc_sentiment.dashboard.routes import api


def create_dashboard_app(lifespan: Any = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Route handlers read ``app.state.session`` and ``app.state.quote_service``;
    the caller (main.py or a test) is responsible for setting both.

    Args:
        lifespan: Optional async context manager for application lifespan events.

    Returns:
        Configured FastAPI application with the JSON API mounted under /api.
    """
    app = FastAPI(
        title="BTC Fear & Greed Classifier",
        lifespan=lifespan,
    )
    app.include_router(api.router, prefix="/api")
    return app
