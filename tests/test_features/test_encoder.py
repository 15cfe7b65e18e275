"""Tests for date and numeric feature encoding."""

import math
from datetime import date, datetime, timedelta

import pytest

from btc_sentiment.features.encoder import (
    decode_date,
    encode_date,
    encode_features,
    encode_rate,
    encode_volume,
    parse_date,
)
from btc_sentiment.models import FeatureVector


class TestEncodeDate:
    """Tests for days-since-2018-01-01 encoding."""

    def test_reference_epoch_is_zero(self) -> None:
        assert encode_date("2018-01-01") == 0

    def test_known_offsets(self) -> None:
        """2018 and 2019 have 365 days, 2020 has 366."""
        assert encode_date("2018-01-02") == 1
        assert encode_date("2019-01-01") == 365
        assert encode_date("2020-01-01") == 730
        assert encode_date("2020-05-31") == 881
        assert encode_date("2021-01-01") == 1096
        assert encode_date("2021-06-01") == 1247

    def test_dates_before_epoch_are_negative(self) -> None:
        assert encode_date("2017-12-31") == -1
        assert encode_date("2017-01-01") == -365

    def test_monotonic_over_consecutive_days(self) -> None:
        """Encoded values strictly increase with calendar order."""
        start = date(2019, 12, 25)
        encoded = [
            encode_date((start + timedelta(days=i)).isoformat()) for i in range(800)
        ]
        assert all(a < b for a, b in zip(encoded, encoded[1:]))

    def test_same_input_same_output(self) -> None:
        assert encode_date("2023-07-15") == encode_date("2023-07-15")

    def test_unpadded_components(self) -> None:
        assert encode_date("2018-1-2") == 1

    def test_surrounding_whitespace_ignored(self) -> None:
        assert encode_date("  2018-01-03 ") == 2

    def test_day_overflow_rolls_into_next_month(self) -> None:
        assert encode_date("2021-02-30") == encode_date("2021-03-02")

    def test_month_overflow_rolls_into_next_year(self) -> None:
        assert encode_date("2021-13-01") == encode_date("2022-01-01")

    def test_day_zero_is_last_day_of_previous_month(self) -> None:
        assert encode_date("2018-02-00") == encode_date("2018-01-31")

    def test_native_date(self) -> None:
        assert encode_date(date(2018, 1, 31)) == 30

    def test_native_datetime_ignores_time_of_day(self) -> None:
        assert encode_date(datetime(2018, 1, 2, 23, 59, 59)) == 1

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "2021/06/01",
            "2021-06",
            "2021-06-01-01",
            "abcd-ef-gh",
            "2021-nan-01",
            "2021-inf-01",
            "99999-01-01",
            None,
            12345,
        ],
    )
    def test_unparseable_returns_zero(self, value: object) -> None:
        assert encode_date(value) == 0

    def test_parse_date_distinguishes_failure_from_epoch(self) -> None:
        """parse_date returns None for garbage but 0 for the epoch itself."""
        assert parse_date("not-a-date") is None
        assert parse_date("2018-01-01") == 0


class TestDecodeDate:
    """Tests for formatting offsets back into calendar dates."""

    def test_epoch(self) -> None:
        assert decode_date(0) == "2018-01-01"

    def test_leap_day(self) -> None:
        assert decode_date(789) == "2020-02-29"

    @pytest.mark.parametrize("offset", [-400, -1, 0, 1, 59, 365, 881, 1247, 3000])
    def test_reencoding_yields_original_offset(self, offset: int) -> None:
        assert encode_date(decode_date(offset)) == offset


class TestNumericEncoding:
    """Tests for rate/volume float pass-through."""

    def test_numeric_strings(self) -> None:
        assert encode_rate("50000") == 50000.0
        assert encode_volume("45000000000") == 45_000_000_000.0

    def test_numbers_pass_through(self) -> None:
        assert encode_rate(95000) == 95000.0
        assert encode_volume(1.5) == 1.5

    def test_whitespace_tolerated(self) -> None:
        assert encode_rate(" 1.25 ") == 1.25

    @pytest.mark.parametrize("value", ["abc", "", None, True, [1], "12,5"])
    def test_unparseable_returns_nan(self, value: object) -> None:
        assert math.isnan(encode_rate(value))
        assert math.isnan(encode_volume(value))


class TestEncodeFeatures:
    """Tests for building the classifier input triple."""

    def test_builds_vector_in_training_order(self) -> None:
        vector = encode_features("2018-01-11", "100", "50000")
        assert vector == FeatureVector(date=10, volume=100.0, rate=50000.0)
        assert vector.as_list() == [10.0, 100.0, 50000.0]

    def test_sentinels_propagate(self) -> None:
        vector = encode_features("garbage", "x", "1")
        assert vector.date == 0
        assert math.isnan(vector.volume)
        assert vector.rate == 1.0
