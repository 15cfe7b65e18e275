"""Custom exceptions for the sentiment classifier application.

The pure feature/selection/advice functions never raise these; they belong
to the session, classifier and data-source collaborators that surround them.
"""


class SentimentError(Exception):
    """Base exception for all application errors."""


class DatasetError(SentimentError):
    """Raised when the training data source cannot be read at all."""


class ModelNotReadyError(SentimentError):
    """Raised when training or prediction is requested before data is loaded."""


class TrainingInProgressError(SentimentError):
    """Raised when a second training run is started while one is active."""


class InvalidInputError(SentimentError):
    """Raised when prediction inputs are missing or do not parse."""


class ClassificationError(SentimentError):
    """Raised when the classifier fails or returns no usable candidates."""


class QuoteUnavailableError(SentimentError):
    """Raised by a single quote source when it cannot supply a quote."""
