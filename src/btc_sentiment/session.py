"""Prediction session: dataset, classifier and UI state for one user.

Holds the ``is_training`` / ``is_model_ready`` flags on the instance and
runs the load -> train -> encode -> classify -> select -> advise pipeline.
The pure steps never raise; this layer turns their sentinels into
SentimentError subclasses the presentation layer can report.
"""

import inspect
import math
from collections.abc import Iterable

from btc_sentiment.advice import advise
from btc_sentiment.config import TrainingSettings
from btc_sentiment.data.loader import load_examples
from btc_sentiment.exceptions import (
    ClassificationError,
    InvalidInputError,
    ModelNotReadyError,
    TrainingInProgressError,
)
from btc_sentiment.features.encoder import encode_rate, encode_volume, parse_date
from btc_sentiment.inference.classifier import ProgressCallback, SentimentClassifier
from btc_sentiment.inference.selector import select_top
from btc_sentiment.logging import get_logger
from btc_sentiment.models import FeatureVector, LoadResult, Prediction, TrainingExample

logger = get_logger(__name__)


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class PredictionSession:
    """Coordinates training and prediction for one classifier instance.

    Usage:
        session = PredictionSession(classifier, settings.training)
        session.load_rows(read_source_rows(path))
        await session.train()
        prediction = await session.predict("2024-03-01", "45000000000", "95000")
    """

    def __init__(self, classifier: SentimentClassifier, settings: TrainingSettings) -> None:
        self._classifier = classifier
        self._settings = settings
        self._examples: list[TrainingExample] = []
        self.is_training = False
        self.is_model_ready = False
        self.last_epoch = 0
        self.last_loss: float | None = None

    @property
    def example_count(self) -> int:
        return len(self._examples)

    @property
    def is_trained(self) -> bool:
        return self._classifier.is_trained

    def load_rows(self, rows: Iterable[object]) -> LoadResult:
        """Replace the training corpus with the valid rows from ``rows``.

        The model is ready to train once at least one example was accepted.
        An empty corpus is not an error; training simply stays unavailable.
        """
        result = load_examples(rows)
        self._examples = list(result.examples)
        self.is_model_ready = bool(self._examples)
        if not self.is_model_ready:
            logger.warning("no_training_examples", skipped=result.skipped)
        return result

    async def train(self, progress_callback: ProgressCallback | None = None) -> None:
        """Fit the classifier on the loaded corpus.

        Raises:
            TrainingInProgressError: If a training run is already active.
            ModelNotReadyError: If no examples have been loaded.
        """
        if self.is_training:
            raise TrainingInProgressError("Training already in progress")
        if not self.is_model_ready:
            raise ModelNotReadyError("Model not ready yet: no training data loaded")

        self.is_training = True
        self.last_epoch = 0
        self.last_loss = None

        async def _on_epoch(epoch: int, loss: float) -> None:
            self.last_epoch = epoch
            self.last_loss = loss
            logger.info("training_epoch", epoch=epoch, loss=round(loss, 4))
            if progress_callback is not None:
                result = progress_callback(epoch, loss)
                if inspect.isawaitable(result):
                    await result

        logger.info(
            "training_started",
            examples=len(self._examples),
            epochs=self._settings.epochs,
            batch_size=self._settings.batch_size,
        )
        try:
            await self._classifier.train(
                self._examples,
                epochs=self._settings.epochs,
                batch_size=self._settings.batch_size,
                progress_callback=_on_epoch,
            )
        finally:
            self.is_training = False

    def encode_inputs(self, date_str: object, volume_str: object, rate_str: object) -> FeatureVector:
        """Validate raw form inputs and encode them into a feature vector.

        Raises:
            InvalidInputError: If a field is empty or does not parse.
        """
        if _is_blank(date_str) or _is_blank(volume_str) or _is_blank(rate_str):
            raise InvalidInputError("Please fill in all fields (date, volume and rate)")

        day_offset = parse_date(date_str)
        volume = encode_volume(volume_str)
        rate = encode_rate(rate_str)
        if day_offset is None or not math.isfinite(volume) or not math.isfinite(rate):
            raise InvalidInputError("Invalid input values. Please check your data.")

        return FeatureVector(date=day_offset, volume=volume, rate=rate)

    async def predict(self, date_str: object, volume_str: object, rate_str: object) -> Prediction:
        """Classify one (date, volume, rate) tuple and attach its advice.

        Raises:
            ModelNotReadyError: If the classifier has not been trained.
            InvalidInputError: If the inputs are missing or malformed.
            ClassificationError: If the classifier fails or returns nothing usable.
        """
        if not self._classifier.is_trained:
            raise ModelNotReadyError("Model not trained yet. Train the model first.")

        features = self.encode_inputs(date_str, volume_str, rate_str)
        logger.info(
            "classifying",
            date=features.date,
            volume=features.volume,
            rate=features.rate,
        )

        candidates = await self._classifier.classify(features)
        top = select_top(candidates)
        if top is None:
            raise ClassificationError("Classifier returned no results")

        confidence = top.confidence if top.confidence is not None else 0.0
        prediction = Prediction(label=top.label, confidence=confidence, advice=advise(top.label))
        logger.info(
            "prediction_made",
            label=prediction.label,
            confidence=prediction.confidence_percent,
        )
        return prediction
