"""Shared data models for the sentiment classifier.

Prices and volumes are plain floats: they are fed straight into the
classifier, which works in float64 anyway.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class SentimentLabel(str, Enum):
    """Closed vocabulary of fear/greed market-mood categories."""

    EXTREME_FEAR = "Extreme Fear"
    FEAR = "Fear"
    NEUTRAL = "Neutral"
    GREED = "Greed"
    EXTREME_GREED = "Extreme Greed"

    @classmethod
    def from_label(cls, label: object) -> "SentimentLabel | None":
        """Return the matching member, or None for out-of-vocabulary labels."""
        try:
            return cls(label)
        except (TypeError, ValueError):
            return None


class StatusLevel(str, Enum):
    """Severity of a user-facing status message."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class SourceRow:
    """One raw tabular record, before validation.

    Values arrive as the data source delivered them: strings from a CSV
    reader, numbers from a typed parser or an API reshaping step.
    """

    date: str | date | None
    volume: str | float | int | None
    rate: str | float | int | None
    prediction: str | None


@dataclass(frozen=True)
class TrainingExample:
    """A validated, encoded training example."""

    date: int  # Days since 2018-01-01
    volume: float
    rate: float
    label: str


@dataclass(frozen=True)
class FeatureVector:
    """The (date, volume, rate) triple fed to the classifier."""

    date: int
    volume: float
    rate: float

    def as_list(self) -> list[float]:
        """Return features in training column order."""
        return [float(self.date), self.volume, self.rate]


@dataclass(frozen=True)
class PredictionCandidate:
    """One scored label returned by the classifier."""

    label: str
    confidence: float | None  # 0-1; None when the classifier gave no score


@dataclass(frozen=True)
class Advice:
    """Advisory message and presentation hints for a sentiment label."""

    advice: str
    emoji: str
    css_class: str


@dataclass
class LoadResult:
    """Outcome of turning source rows into training examples."""

    examples: list[TrainingExample] = field(default_factory=list)
    skipped: int = 0

    @property
    def accepted(self) -> int:
        return len(self.examples)


@dataclass(frozen=True)
class Prediction:
    """Final payload handed to the presentation layer."""

    label: str
    confidence: float
    advice: Advice

    @property
    def confidence_percent(self) -> str:
        """Confidence as a percentage with one decimal place, e.g. '87.3'."""
        return f"{self.confidence * 100:.1f}"
