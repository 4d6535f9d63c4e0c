import pytest

from forex_sentiment.analysis.decision import (
    build_summary,
    build_why,
    compute_spread,
    decide,
    decide_spread,
    top_themes,
)
from forex_sentiment.models import CurrencySentiment, Decision, Influencer


def _sent(avg=0.0, hits=None, title=None, high=0) -> CurrencySentiment:
    influencers = ()
    if title is not None:
        influencers = (Influencer(title=title, url="", domain="", seen_at=None, weight=2.6, score=avg),)
    return CurrencySentiment(
        weighted_average=avg,
        high_impact_count=high,
        hit_counts_by_theme=hits or {},
        top_influencers=influencers,
    )


@pytest.mark.parametrize(
    "spread, expected",
    [
        (0.12, Decision.BULLISH),
        (0.1199999, Decision.NEUTRAL),
        (0.0, Decision.NEUTRAL),
        (-0.1199999, Decision.NEUTRAL),
        (-0.12, Decision.BEARISH),
        (2.0, Decision.BULLISH),
        (-2.0, Decision.BEARISH),
    ],
)
def test_decision_boundaries(spread, expected) -> None:
    assert decide_spread(spread) is expected


def test_decision_labels() -> None:
    assert Decision.BULLISH.label == "Bullish (Buy)"
    assert Decision.BEARISH.label == "Bearish (Sell)"
    assert Decision.NEUTRAL.label == "Neutral"
    assert Decision.BULLISH.value == "BULLISH_BUY"


def test_spread_is_clamped() -> None:
    # averages are already in [-1, 1], so the clamp is a safety bound
    assert compute_spread(_sent(1.0), _sent(-1.0)) == 2.0
    assert decide(_sent(0.5), _sent(0.1)) == (pytest.approx(0.4), Decision.BULLISH)


def test_top_themes_ties_keep_catalog_order() -> None:
    hits = {"Rates/Decision": 1, "CPI/Inflation": 3, "Jobs/NFP": 1}
    assert top_themes(hits) == ["CPI/Inflation (3)", "Rates/Decision (1)"]
    assert top_themes({}) == []


def test_why_full() -> None:
    base = _sent(0.6, {"Rates/Decision": 2, "CPI/Inflation": 1, "Jobs/NFP": 1}, "Fed hikes")
    quote = _sent(0.0, {}, "ECB holds")
    why = build_why("USD", "EUR", base, quote, 0.6, Decision.BULLISH)
    assert why == (
        "More positive (weighted) news for USD than EUR, based on high-impact macro headlines (spread 0.60). "
        "Top drivers: USD → Rates/Decision (2), CPI/Inflation (1), EUR → none. "
        "Example: USD: “Fed hikes” | EUR: “ECB holds”."
    )


def test_why_bearish_direction() -> None:
    why = build_why("EUR", "USD", _sent(-0.3), _sent(0.2), -0.5, Decision.BEARISH)
    assert why.startswith("More positive (weighted) news for USD than EUR")


def test_why_empty_sides_has_no_artifacts() -> None:
    why = build_why("EUR", "USD", _sent(), _sent(), 0.0, Decision.NEUTRAL)
    assert why == "No clear advantage between EUR and USD, based on high-impact macro headlines (spread 0.00)."
    assert "Top drivers" not in why
    assert "Example" not in why


def test_why_example_only_from_side_with_influencer() -> None:
    why = build_why("EUR", "USD", _sent(title="Euro firm"), _sent(), 0.0, Decision.NEUTRAL)
    assert why.endswith("Example: EUR: “Euro firm”.")


def test_summary_matches_decision_wording() -> None:
    base, quote = _sent(0.6, high=1), _sent(0.0)
    summary = build_summary("USDJPY", "USD", "JPY", base, quote, 0.6, Decision.BULLISH)
    assert summary == (
        "For USDJPY, weighted headline sentiment for USD is 0.60 vs JPY at 0.00 (spread 0.60), "
        "so the signal tilts bullish. High-impact hits: USD=1, JPY=0."
    )
    assert "tilts bearish" in build_summary("USDJPY", "USD", "JPY", quote, base, -0.6, Decision.BEARISH)
    assert "mixed/neutral" in build_summary("USDJPY", "USD", "JPY", quote, quote, 0.0, Decision.NEUTRAL)
