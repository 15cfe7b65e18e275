"""JSON API endpoints for training, prediction and live quote lookup."""

import asyncio
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from btc_sentiment.data.quotes import QuoteService
from btc_sentiment.exceptions import (
    ClassificationError,
    InvalidInputError,
    ModelNotReadyError,
    SentimentError,
    TrainingInProgressError,
)
from btc_sentiment.models import StatusLevel
from btc_sentiment.session import PredictionSession

log = structlog.get_logger(__name__)

router = APIRouter()

DISCLAIMER = "Remember: This is educational only, NOT financial advice!"


class PredictRequest(BaseModel):
    """Raw form values; validated by the session, not by pydantic."""

    date: str = ""
    volume: str = ""
    rate: str = ""


def _status(message: str, level: StatusLevel, status_code: int = 200, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": {"message": message, "level": level.value}, **extra},
    )


def _error_response(exc: SentimentError) -> JSONResponse:
    """Map session errors onto HTTP status codes and status levels."""
    if isinstance(exc, TrainingInProgressError):
        return _status(str(exc), StatusLevel.WARNING, status_code=409)
    if isinstance(exc, ModelNotReadyError):
        return _status(str(exc), StatusLevel.ERROR, status_code=409)
    if isinstance(exc, InvalidInputError):
        return _status(str(exc), StatusLevel.ERROR, status_code=422)
    if isinstance(exc, ClassificationError):
        return _status("Prediction failed. Please try again.", StatusLevel.ERROR, status_code=502)
    return _status(str(exc), StatusLevel.ERROR, status_code=500)


@router.get("/status")
async def get_status(request: Request) -> JSONResponse:
    """Current session state: data loaded, training progress, trained."""
    session: PredictionSession = request.app.state.session
    return JSONResponse(content={
        "examples": session.example_count,
        "is_model_ready": session.is_model_ready,
        "is_training": session.is_training,
        "is_trained": session.is_trained,
        "epoch": session.last_epoch,
        "loss": session.last_loss,
    })


@router.post("/train")
async def train_model(request: Request) -> JSONResponse:
    """Fit the classifier on the loaded dataset and report the final loss."""
    session: PredictionSession = request.app.state.session
    try:
        await session.train()
    except SentimentError as e:
        log.warning("train_rejected", error=str(e))
        return _error_response(e)

    return _status(
        "Training complete! Enter data and click 'Predict' to see results.",
        StatusLevel.SUCCESS,
        epochs=session.last_epoch,
        loss=session.last_loss,
    )


@router.post("/predict")
async def predict(request: Request, body: PredictRequest) -> JSONResponse:
    """Classify one (date, volume, rate) tuple into a sentiment with advice."""
    session: PredictionSession = request.app.state.session
    try:
        prediction = await session.predict(body.date, body.volume, body.rate)
    except SentimentError as e:
        log.warning("predict_failed", error=str(e))
        return _error_response(e)

    return JSONResponse(content={
        "label": prediction.label,
        "confidence": prediction.confidence,
        "confidence_percent": prediction.confidence_percent,
        "advice": prediction.advice.advice,
        "emoji": prediction.advice.emoji,
        "css_class": prediction.advice.css_class,
        "disclaimer": DISCLAIMER,
    })


@router.get("/live-quote")
async def get_live_quote(request: Request) -> JSONResponse:
    """Latest BTC price and volume, rounded for the input form."""
    quote_service: QuoteService = request.app.state.quote_service
    quote = await asyncio.to_thread(quote_service.fetch_live_quote)

    payload = {
        "source": quote.source,
        "rate": round(quote.price),
        "volume": round(quote.volume),
        "change_24h": None if quote.change_24h is None else round(quote.change_24h, 2),
        "is_sample": quote.is_sample,
        "fetched_at": datetime.fromtimestamp(quote.fetched_at, tz=timezone.utc).isoformat(),
    }
    if quote.is_sample:
        return _status(
            "API unavailable. Using sample values. You can edit them manually.",
            StatusLevel.WARNING,
            quote=payload,
        )
    return _status(f"Live data loaded from {quote.source}!", StatusLevel.SUCCESS, quote=payload)
