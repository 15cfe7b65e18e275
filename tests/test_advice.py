"""Tests for the sentiment label to advice mapping."""

import pytest

from btc_sentiment.advice import ADVICE_BY_LABEL, UNKNOWN_ADVICE, advise
from btc_sentiment.models import SentimentLabel


def test_extreme_fear_is_strong_buy() -> None:
    advice = advise("Extreme Fear")
    assert "STRONG BUY" in advice.advice
    assert advice.emoji
    assert advice.css_class == "extreme-fear"


@pytest.mark.parametrize(
    ("label", "css_class", "keyword"),
    [
        ("Fear", "fear", "BUY"),
        ("Neutral", "neutral", "HOLD"),
        ("Greed", "greed", "taking profits"),
        ("Extreme Greed", "extreme-greed", "SELL"),
    ],
)
def test_each_label_maps_to_its_class(label: str, css_class: str, keyword: str) -> None:
    advice = advise(label)
    assert advice.css_class == css_class
    assert keyword in advice.advice
    assert advice.emoji


def test_enum_member_accepted() -> None:
    assert advise(SentimentLabel.GREED) == ADVICE_BY_LABEL[SentimentLabel.GREED]


def test_every_label_has_distinct_advice() -> None:
    assert set(ADVICE_BY_LABEL) == set(SentimentLabel)
    assert len({a.css_class for a in ADVICE_BY_LABEL.values()}) == len(SentimentLabel)


@pytest.mark.parametrize("label", ["banana", "", None, "fear", "Extreme  Fear", 42])
def test_unknown_labels_fall_back(label: object) -> None:
    advice = advise(label)
    assert advice == UNKNOWN_ADVICE
    assert advice.css_class == "unknown"
    assert advice.advice == "Unable to determine market sentiment"
