"""Feature encoding for classifier inputs."""

from btc_sentiment.features.encoder import (
    REFERENCE_EPOCH,
    decode_date,
    encode_date,
    encode_features,
    encode_rate,
    encode_volume,
    parse_date,
)

__all__ = [
    "REFERENCE_EPOCH",
    "decode_date",
    "encode_date",
    "encode_features",
    "encode_rate",
    "encode_volume",
    "parse_date",
]
