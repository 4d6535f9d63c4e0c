"""Text processing: normalization, theme classification, polarity scoring, query building."""

from .normalize import clean_html_to_text, normalize_plain_text, parse_seendate
from .classify import BASELINE_WEIGHT, classify
from .query import make_currency_query, quote_if_needed
from .polarity import PolarityBackend, PolarityScorer, create_polarity_backend

__all__ = [
    "clean_html_to_text",
    "normalize_plain_text",
    "parse_seendate",
    "BASELINE_WEIGHT",
    "classify",
    "make_currency_query",
    "quote_if_needed",
    "PolarityBackend",
    "PolarityScorer",
    "create_polarity_backend",
]
