from __future__ import annotations

from typing import Any, Mapping

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from .base import PolarityBackend


class VaderBackend(PolarityBackend):
    """Lexicon-based scorer from ``vaderSentiment``; tuned for short social/news text."""

    def __init__(self) -> None:
        self._analyzer = SentimentIntensityAnalyzer()

    def polarity_scores(self, text: str) -> Mapping[str, Any]:
        return self._analyzer.polarity_scores(text)
