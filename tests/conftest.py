"""Shared test fixtures for the sentiment classifier."""

import pytest

from btc_sentiment.config import AppSettings, QuoteSettings, TrainingSettings
from btc_sentiment.inference.classifier import SentimentClassifier
from btc_sentiment.models import FeatureVector, PredictionCandidate, SourceRow


@pytest.fixture
def mock_settings() -> AppSettings:
    """Return AppSettings with fast, deterministic test defaults."""
    return AppSettings(
        log_level="DEBUG",
        training=TrainingSettings(
            epochs=3,
            batch_size=4,
            hidden_layer_sizes=(8,),
            random_state=0,
        ),
        quotes=QuoteSettings(timeout_seconds=1.0),
    )


@pytest.fixture
def source_rows() -> list[SourceRow]:
    """A small labelled dataset covering all five sentiment labels."""
    return [
        SourceRow(date="2018-02-05", volume="9000000000", rate="6900", prediction="Extreme Fear"),
        SourceRow(date="2019-06-26", volume="30000000000", rate="12900", prediction="Extreme Greed"),
        SourceRow(date="2020-03-12", volume="53000000000", rate="4800", prediction="Extreme Fear"),
        SourceRow(date="2020-09-01", volume="31000000000", rate="11900", prediction="Greed"),
        SourceRow(date="2021-06-01", volume="100", rate="50000", prediction="Fear"),
        SourceRow(date="2022-11-09", volume="118000000000", rate="15900", prediction="Extreme Fear"),
        SourceRow(date="2023-04-10", volume="19000000000", rate="29600", prediction="Neutral"),
        SourceRow(date="2024-03-13", volume="40000000000", rate="73000", prediction="Extreme Greed"),
    ]


class FakeClassifier(SentimentClassifier):
    """In-memory classifier double returning fixed candidates."""

    def __init__(self, candidates: list[PredictionCandidate] | None = None) -> None:
        self.candidates = candidates if candidates is not None else [
            PredictionCandidate(label="Fear", confidence=0.2),
            PredictionCandidate(label="Greed", confidence=0.7),
            PredictionCandidate(label="Neutral", confidence=0.1),
        ]
        self.trained = False
        self.train_calls: list[tuple[int, int, int]] = []
        self.classified: list[FeatureVector] = []

    @property
    def is_trained(self) -> bool:
        return self.trained

    async def train(self, examples, epochs, batch_size, progress_callback=None) -> None:
        self.train_calls.append((len(examples), epochs, batch_size))
        for epoch in range(1, epochs + 1):
            if progress_callback is not None:
                result = progress_callback(epoch, 1.0 / epoch)
                if result is not None:
                    await result
        self.trained = True

    async def classify(self, features: FeatureVector) -> list[PredictionCandidate]:
        self.classified.append(features)
        return list(self.candidates)


@pytest.fixture
def fake_classifier() -> FakeClassifier:
    return FakeClassifier()
