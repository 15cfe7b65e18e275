"""Validation and ingestion of source rows into training examples.

Partial datasets are normal: a row that fails any check is skipped and
counted, never raised. Accepted rows keep their input order.
"""

import math
from collections.abc import Iterable, Mapping

from btc_sentiment.features.encoder import encode_rate, encode_volume, parse_date
from btc_sentiment.logging import get_logger
from btc_sentiment.models import LoadResult, SourceRow, TrainingExample

logger = get_logger(__name__)

_FIELDS = ("date", "volume", "rate", "prediction")


def _row_values(row: object) -> tuple | None:
    """Extract (date, volume, rate, prediction) from a mapping or SourceRow."""
    if isinstance(row, SourceRow):
        return row.date, row.volume, row.rate, row.prediction
    if isinstance(row, Mapping):
        return tuple(row.get(name) for name in _FIELDS)
    return None


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def to_training_example(row: object) -> TrainingExample | None:
    """Convert one source row, or return None if it is malformed.

    A row is well-formed when the date and label are non-empty, the date
    parses, and volume and rate are finite numbers.
    """
    values = _row_values(row)
    if values is None:
        return None
    date_value, volume_value, rate_value, label = values

    if _is_blank(date_value) or _is_blank(label) or not isinstance(label, str):
        return None

    day_offset = parse_date(date_value)
    if day_offset is None:
        return None

    volume = encode_volume(volume_value)
    rate = encode_rate(rate_value)
    if not (math.isfinite(volume) and math.isfinite(rate)):
        return None

    return TrainingExample(
        date=day_offset,
        volume=volume,
        rate=rate,
        label=label.strip(),
    )


def load_examples(rows: Iterable[object] | None) -> LoadResult:
    """Build the training corpus from already-parsed source rows.

    Args:
        rows: SourceRow objects or mappings with date/volume/rate/prediction.
              None is treated as an empty input.

    Returns:
        LoadResult with the accepted examples in input order and the number
        of skipped rows. Empty when nothing was usable.
    """
    result = LoadResult()
    for row in rows or ():
        example = to_training_example(row)
        if example is None:
            result.skipped += 1
            continue
        result.examples.append(example)

    logger.info(
        "dataset_loaded",
        accepted=result.accepted,
        skipped=result.skipped,
    )
    return result
