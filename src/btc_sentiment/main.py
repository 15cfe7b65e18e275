"""Entry point for the BTC fear/greed sentiment classifier.

Wires the components together and serves the FastAPI app via uvicorn.

Component wiring order (in _build_components):
1. AppSettings (configuration)
2. Logging setup
3. MLPSentimentClassifier (scikit-learn network)
4. PredictionSession (dataset, training and prediction state)
5. QuoteService (live price/volume with fallback)
6. Dataset load from CSV (once, at startup)
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI

from btc_sentiment.config import AppSettings
from btc_sentiment.data.csv_source import read_source_rows
from btc_sentiment.data.quotes import QuoteService
from btc_sentiment.exceptions import DatasetError
from btc_sentiment.inference.classifier import MLPSentimentClassifier
from btc_sentiment.logging import get_logger, setup_logging
from btc_sentiment.session import PredictionSession


def _build_components(settings: AppSettings) -> dict[str, Any]:
    """Build the session and quote service from settings.

    Args:
        settings: Application-wide settings.

    Returns:
        Dict mapping component names to instances.
    """
    classifier = MLPSentimentClassifier(settings.training)
    session = PredictionSession(classifier, settings.training)
    quote_service = QuoteService(settings.quotes)

    return {
        "classifier": classifier,
        "session": session,
        "quote_service": quote_service,
    }


def load_dataset(session: PredictionSession, csv_path: str) -> None:
    """Load the training CSV into the session.

    A missing or unreadable file leaves the session without data rather than
    stopping the server; /api/status then reports ``is_model_ready: false``.
    """
    logger = get_logger("btc_sentiment.main")
    try:
        rows = read_source_rows(csv_path)
    except DatasetError as e:
        logger.error("dataset_unavailable", path=csv_path, error=str(e))
        return

    result = session.load_rows(rows)
    logger.info(
        "ready_to_train",
        path=csv_path,
        examples=result.accepted,
        skipped=result.skipped,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the dataset on startup and expose components on app.state."""
    logger = get_logger("btc_sentiment.main")
    settings: AppSettings = app.state.settings
    components = app.state.components

    app.state.session = components["session"]
    app.state.quote_service = components["quote_service"]

    await asyncio.to_thread(load_dataset, components["session"], settings.dataset.csv_path)

    logger.info("lifespan_started", examples=components["session"].example_count)

    yield

    logger.info("btc_sentiment_stopped")


async def run() -> None:
    """Run the classifier API server."""
    # 1. Load settings
    settings = AppSettings()

    # 2. Setup logging
    setup_logging(settings.log_level, service=settings.service_name)
    logger = get_logger("btc_sentiment.main")

    # 3-5. Build components
    components = _build_components(settings)

    from btc_sentiment.dashboard.app import create_dashboard_app

    app = create_dashboard_app(lifespan=lifespan)
    app.state.settings = settings
    app.state.components = components

    logger.info(
        "starting_dashboard",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        dataset=settings.dataset.csv_path,
    )

    config = uvicorn.Config(
        app,
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        log_level="warning",
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
