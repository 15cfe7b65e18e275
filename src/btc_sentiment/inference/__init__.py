"""Classifier collaborators and post-processing of their output."""

from btc_sentiment.inference.classifier import MLPSentimentClassifier, SentimentClassifier
from btc_sentiment.inference.selector import select_top

__all__ = [
    "MLPSentimentClassifier",
    "SentimentClassifier",
    "select_top",
]
