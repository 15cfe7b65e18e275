"""Trainable sentiment classifier collaborators.

The session depends only on the abstract SentimentClassifier; the concrete
implementation delegates the network itself to scikit-learn. Inputs are
standardised before fitting (the equivalent of normalising the training
data in place), and CPU-bound work runs in a worker thread so the event
loop serving the API stays responsive.
"""

import asyncio
import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence

import numpy as np
from sklearn.exceptions import NotFittedError
from sklearn.neural_network import MLPClassifier
from sklearn.preprocessing import StandardScaler

from btc_sentiment.config import TrainingSettings
from btc_sentiment.exceptions import ClassificationError, ModelNotReadyError
from btc_sentiment.logging import get_logger
from btc_sentiment.models import FeatureVector, PredictionCandidate, TrainingExample

logger = get_logger(__name__)

#: Called after each epoch with (epoch_number, loss).
ProgressCallback = Callable[[int, float], Awaitable[None] | None]


class SentimentClassifier(ABC):
    """Abstract base class for trainable sentiment classifiers."""

    @property
    @abstractmethod
    def is_trained(self) -> bool:
        """Whether classify() can be called."""
        ...

    @abstractmethod
    async def train(
        self,
        examples: Sequence[TrainingExample],
        epochs: int,
        batch_size: int,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Fit the classifier on the given examples."""
        ...

    @abstractmethod
    async def classify(self, features: FeatureVector) -> list[PredictionCandidate]:
        """Score every known label for one feature vector.

        Raises:
            ClassificationError: If scoring fails.
        """
        ...


def _examples_to_arrays(examples: Sequence[TrainingExample]) -> tuple[np.ndarray, np.ndarray]:
    x = np.array([[float(e.date), e.volume, e.rate] for e in examples], dtype=np.float64)
    y = np.array([e.label for e in examples], dtype=object)
    return x, y


class MLPSentimentClassifier(SentimentClassifier):
    """Feed-forward classifier backed by scikit-learn's MLPClassifier.

    Each epoch is one ``partial_fit`` pass over the whole corpus in
    mini-batches of ``batch_size``, which gives a loss value per epoch for
    progress reporting.
    """

    def __init__(self, settings: TrainingSettings) -> None:
        self._settings = settings
        self._scaler: StandardScaler | None = None
        self._model: MLPClassifier | None = None

    @property
    def is_trained(self) -> bool:
        return self._model is not None

    @property
    def labels(self) -> list[str]:
        if self._model is None:
            return []
        return [str(c) for c in self._model.classes_]

    async def train(
        self,
        examples: Sequence[TrainingExample],
        epochs: int,
        batch_size: int,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        if not examples:
            raise ModelNotReadyError("No training examples loaded")

        x, y = _examples_to_arrays(examples)
        classes = np.unique(y)

        scaler = StandardScaler()
        x_scaled = await asyncio.to_thread(scaler.fit_transform, x)

        model = MLPClassifier(
            hidden_layer_sizes=self._settings.hidden_layer_sizes,
            batch_size=min(batch_size, len(examples)),
            learning_rate_init=self._settings.learning_rate_init,
            random_state=self._settings.random_state,
        )

        for epoch in range(1, epochs + 1):
            if epoch == 1:
                await asyncio.to_thread(model.partial_fit, x_scaled, y, classes=classes)
            else:
                await asyncio.to_thread(model.partial_fit, x_scaled, y)
            loss = float(model.loss_)
            if progress_callback is not None:
                result = progress_callback(epoch, loss)
                if inspect.isawaitable(result):
                    await result

        self._scaler = scaler
        self._model = model
        logger.info(
            "training_complete",
            examples=len(examples),
            epochs=epochs,
            labels=self.labels,
            final_loss=round(float(model.loss_), 4),
        )

    async def classify(self, features: FeatureVector) -> list[PredictionCandidate]:
        if self._model is None or self._scaler is None:
            raise ClassificationError("Classifier has not been trained")

        x = np.array([features.as_list()], dtype=np.float64)
        try:
            x_scaled = self._scaler.transform(x)
            probabilities = await asyncio.to_thread(self._model.predict_proba, x_scaled)
        except (NotFittedError, ValueError) as e:
            raise ClassificationError(f"Prediction failed: {e}") from e

        return [
            PredictionCandidate(label=str(label), confidence=float(p))
            for label, p in zip(self._model.classes_, probabilities[0])
        ]
