"""Feature encoding for the (date, volume, rate) classifier input.

Dates become whole calendar days since the reference epoch 2018-01-01.
The encoding works on calendar dates only (no clock, no timezone), so the
same date string always yields the same integer and the order of encoded
values follows calendar order.

Two flavours of the date transform are exposed:

- ``parse_date`` returns ``None`` when the input cannot be parsed.
- ``encode_date`` returns ``0`` instead. ``0`` is also the encoding of the
  epoch itself, so callers that need to tell the two apart use
  ``parse_date``.
"""

import math
from datetime import date, datetime, timedelta

from btc_sentiment.models import FeatureVector

#: Zero point of the date encoding.
REFERENCE_EPOCH = date(2018, 1, 1)


def _parse_component(part: str) -> int | None:
    """Parse one Y/M/D component; None unless it is a finite number."""
    try:
        value = float(part)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value)


def _to_calendar_date(value: object) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    parts = value.strip().split("-")
    if len(parts) != 3:
        return None

    components = [_parse_component(p) for p in parts]
    if any(c is None for c in components):
        return None
    year, month, day = components

    # Out-of-range month/day roll over into the next month/year
    # (2021-02-30 is 2021-03-02, 2021-13-01 is 2022-01-01).
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def parse_date(value: object) -> int | None:
    """Encode a date as days since 2018-01-01, or None if unparseable.

    Args:
        value: A ``YYYY-MM-DD`` string, or a ``date``/``datetime``.

    Returns:
        Signed day offset from the reference epoch, or None.
    """
    calendar_date = _to_calendar_date(value)
    if calendar_date is None:
        return None
    return (calendar_date - REFERENCE_EPOCH).days


def encode_date(value: object) -> int:
    """Encode a date as days since 2018-01-01, returning 0 if unparseable."""
    offset = parse_date(value)
    return 0 if offset is None else offset


def decode_date(offset: int) -> str:
    """Format a day offset back into a ``YYYY-MM-DD`` string."""
    return (REFERENCE_EPOCH + timedelta(days=offset)).isoformat()


def _to_float(value: object) -> float:
    if isinstance(value, bool) or value is None:
        return math.nan
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan


def encode_rate(value: object) -> float:
    """Return the price as a float, or NaN when it does not parse."""
    return _to_float(value)


def encode_volume(value: object) -> float:
    """Return the volume as a float, or NaN when it does not parse."""
    return _to_float(value)


def encode_features(date_value: object, volume: object, rate: object) -> FeatureVector:
    """Build the classifier feature triple.

    No validation happens here: an unparseable date encodes to 0 and bad
    numbers to NaN. Callers validate the raw inputs first.
    """
    return FeatureVector(
        date=encode_date(date_value),
        volume=encode_volume(volume),
        rate=encode_rate(rate),
    )
