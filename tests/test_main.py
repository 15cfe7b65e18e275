"""Tests for startup wiring and dataset loading."""

from pathlib import Path

from btc_sentiment.config import AppSettings
from btc_sentiment.data.quotes import QuoteService
from btc_sentiment.inference.classifier import MLPSentimentClassifier
from btc_sentiment.main import _build_components, load_dataset
from btc_sentiment.session import PredictionSession


def test_build_components(mock_settings: AppSettings) -> None:
    components = _build_components(mock_settings)

    assert isinstance(components["classifier"], MLPSentimentClassifier)
    assert isinstance(components["session"], PredictionSession)
    assert isinstance(components["quote_service"], QuoteService)


def test_load_dataset_from_csv(mock_settings: AppSettings, tmp_path: Path) -> None:
    path = tmp_path / "dataset.csv"
    path.write_text(
        "date,volume,rate,prediction\n"
        "2021-06-01,100,50000,Fear\n"
        ",1,1,Greed\n",
        encoding="utf-8",
    )
    session = _build_components(mock_settings)["session"]

    load_dataset(session, str(path))

    assert session.example_count == 1
    assert session.is_model_ready is True


def test_missing_dataset_leaves_session_unready(mock_settings: AppSettings, tmp_path: Path) -> None:
    session = _build_components(mock_settings)["session"]

    load_dataset(session, str(tmp_path / "missing.csv"))

    assert session.example_count == 0
    assert session.is_model_ready is False
