"""BTC fear/greed sentiment classifier.

Encodes (date, volume, rate) inputs, loads labelled history into training
examples, and turns classifier scores into a sentiment label with advice.
"""

from btc_sentiment.advice import advise
from btc_sentiment.data.loader import load_examples
from btc_sentiment.features.encoder import encode_date, encode_rate, encode_volume
from btc_sentiment.inference.selector import select_top

__all__ = [
    "advise",
    "encode_date",
    "encode_rate",
    "encode_volume",
    "load_examples",
    "select_top",
]
