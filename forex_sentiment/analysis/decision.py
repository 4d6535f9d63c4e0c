from __future__ import annotations

from typing import List, Mapping, Optional, Tuple

from ..models import CurrencySentiment, Decision
from .aggregate import clamp

BULLISH_THRESHOLD = 0.12
BEARISH_THRESHOLD = -0.12
MAX_WHY_SENTENCES = 3


def decide_spread(spread: float) -> Decision:
    """Three-way classification with a dead zone of (-0.12, 0.12)."""
    if spread >= BULLISH_THRESHOLD:
        return Decision.BULLISH
    if spread <= BEARISH_THRESHOLD:
        return Decision.BEARISH
    return Decision.NEUTRAL


def compute_spread(base: CurrencySentiment, quote: CurrencySentiment) -> float:
    return clamp(base.weighted_average - quote.weighted_average, -2.0, 2.0)


def decide(base: CurrencySentiment, quote: CurrencySentiment) -> Tuple[float, Decision]:
    spread = compute_spread(base, quote)
    return spread, decide_spread(spread)


def top_themes(hit_counts: Mapping[str, int], limit: int = 2) -> List[str]:
    # sorted() is stable: equal counts keep the mapping's (catalog) order
    entries = sorted(hit_counts.items(), key=lambda kv: -kv[1])
    return [f"{name} ({count})" for name, count in entries[:limit]]


def _example_title(sentiment: CurrencySentiment) -> Optional[str]:
    if sentiment.top_influencers and sentiment.top_influencers[0].title:
        return f"“{sentiment.top_influencers[0].title}”"
    return None


def build_why(
    base_code: str,
    quote_code: str,
    base: CurrencySentiment,
    quote: CurrencySentiment,
    spread: float,
    decision: Decision,
) -> str:
    """Short explanation: direction, top drivers, one example headline per side."""
    if decision is Decision.BULLISH:
        direction = f"More positive (weighted) news for {base_code} than {quote_code}"
    elif decision is Decision.BEARISH:
        direction = f"More positive (weighted) news for {quote_code} than {base_code}"
    else:
        direction = f"No clear advantage between {base_code} and {quote_code}"

    parts = [f"{direction}, based on high-impact macro headlines (spread {spread:.2f})."]

    base_top = top_themes(base.hit_counts_by_theme)
    quote_top = top_themes(quote.hit_counts_by_theme)
    if base_top or quote_top:
        parts.append(
            f"Top drivers: {base_code} → {', '.join(base_top) or 'none'}, "
            f"{quote_code} → {', '.join(quote_top) or 'none'}."
        )

    examples = []
    base_example = _example_title(base)
    quote_example = _example_title(quote)
    if base_example:
        examples.append(f"{base_code}: {base_example}")
    if quote_example:
        examples.append(f"{quote_code}: {quote_example}")
    if examples:
        parts.append(f"Example: {' | '.join(examples)}.")

    return " ".join(parts[:MAX_WHY_SENTENCES])


def build_summary(
    pair: str,
    base_code: str,
    quote_code: str,
    base: CurrencySentiment,
    quote: CurrencySentiment,
    spread: float,
    decision: Decision,
) -> str:
    if decision is Decision.BULLISH:
        direction = "tilts bullish"
    elif decision is Decision.BEARISH:
        direction = "tilts bearish"
    else:
        direction = "looks mixed/neutral"

    return (
        f"For {pair}, weighted headline sentiment for {base_code} is {base.weighted_average:.2f} "
        f"vs {quote_code} at {quote.weighted_average:.2f} (spread {spread:.2f}), "
        f"so the signal {direction}. "
        f"High-impact hits: {base_code}={base.high_impact_count}, {quote_code}={quote.high_impact_count}."
    )
