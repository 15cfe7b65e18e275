"""Fixed sentiment label to advisory message mapping.

Educational only, not financial advice.
"""

from btc_sentiment.models import Advice, SentimentLabel

ADVICE_BY_LABEL: dict[SentimentLabel, Advice] = {
    SentimentLabel.EXTREME_FEAR: Advice(
        advice="Buy the dip → STRONG BUY",
        emoji="🔥",
        css_class="extreme-fear",
    ),
    SentimentLabel.FEAR: Advice(
        advice="Good entry point → BUY (especially for long-term holders)",
        emoji="😰",
        css_class="fear",
    ),
    SentimentLabel.NEUTRAL: Advice(
        advice="Market is stable → HOLD or wait for clear signals",
        emoji="😐",
        css_class="neutral",
    ),
    SentimentLabel.GREED: Advice(
        advice="Market is heating up → Consider taking profits",
        emoji="😎",
        css_class="greed",
    ),
    SentimentLabel.EXTREME_GREED: Advice(
        advice="Buy low, sell high → SELL (take profits)",
        emoji="🤑",
        css_class="extreme-greed",
    ),
}

UNKNOWN_ADVICE = Advice(
    advice="Unable to determine market sentiment",
    emoji="❓",
    css_class="unknown",
)


def advise(label: object) -> Advice:
    """Return the advisory tuple for a label; UNKNOWN_ADVICE if out of vocabulary."""
    sentiment = SentimentLabel.from_label(label)
    if sentiment is None:
        return UNKNOWN_ADVICE
    return ADVICE_BY_LABEL[sentiment]
