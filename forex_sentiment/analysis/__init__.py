"""Currency sentiment aggregation and the pair decision engine."""

from .aggregate import aggregate, clamp, combined_text, rank_influencers
from .decision import (
    BEARISH_THRESHOLD,
    BULLISH_THRESHOLD,
    build_summary,
    build_why,
    compute_spread,
    decide,
    decide_spread,
    top_themes,
)
from .headlines import pick_top_headlines

__all__ = [
    "aggregate",
    "clamp",
    "combined_text",
    "rank_influencers",
    "BEARISH_THRESHOLD",
    "BULLISH_THRESHOLD",
    "build_summary",
    "build_why",
    "compute_spread",
    "decide",
    "decide_spread",
    "top_themes",
    "pick_top_headlines",
]
