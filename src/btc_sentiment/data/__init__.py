"""Training data ingestion and live quote lookup.

Provides the CSV row reader, the row validator/loader that builds the
training corpus, and the multi-source live quote service.
"""

from btc_sentiment.data.csv_source import read_source_rows
from btc_sentiment.data.loader import load_examples, to_training_example
from btc_sentiment.data.quotes import LiveQuote, QuoteService, QuoteSource

__all__ = [
    "LiveQuote",
    "QuoteService",
    "QuoteSource",
    "load_examples",
    "read_source_rows",
    "to_training_example",
]
