from __future__ import annotations

from typing import Dict, List

from forex_sentiment.models import Article
from forex_sentiment.processors.polarity import PolarityBackend


class FakeBackend(PolarityBackend):
    """Scores by substring lookup; unknown text is neutral."""

    def __init__(self, scores: Dict[str, float] | None = None) -> None:
        self.scores = scores or {}
        self.calls: List[str] = []

    def polarity_scores(self, text: str):
        self.calls.append(text)
        for needle, value in self.scores.items():
            if needle in text:
                return {"neg": 0.0, "neu": 0.0, "pos": 0.0, "compound": value}
        return {"neg": 0.0, "neu": 1.0, "pos": 0.0, "compound": 0.0}


def art(title: str, description: str | None = None, **kw) -> Article:
    kw.setdefault("url", "https://news.example/" + title.lower().replace(" ", "-")[:40])
    return Article(title=title, description=description, **kw)
