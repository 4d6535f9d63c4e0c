from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Decision(str, Enum):
    BULLISH = "BULLISH_BUY"
    BEARISH = "BEARISH_SELL"
    NEUTRAL = "NEUTRAL"

    @property
    def label(self) -> str:
        return _DECISION_LABELS[self]


_DECISION_LABELS = {
    Decision.BULLISH: "Bullish (Buy)",
    Decision.BEARISH: "Bearish (Sell)",
    Decision.NEUTRAL: "Neutral",
}


@dataclass(frozen=True, slots=True)
class Influencer:
    title: str
    url: str
    domain: str
    seen_at: Optional[datetime]
    weight: float
    score: float
    theme_names: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "domain": self.domain,
            "seendate": self.seen_at.isoformat() if self.seen_at else None,
            "weight": self.weight,
            "score": self.score,
            "hits": list(self.theme_names),
        }


@dataclass(frozen=True, slots=True)
class CurrencySentiment:
    weighted_average: float = 0.0
    high_impact_count: int = 0
    hit_counts_by_theme: Dict[str, int] = field(default_factory=dict)
    total_weight_mass: float = 0.0
    top_influencers: Tuple[Influencer, ...] = ()
    articles_used: int = 0


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    pair: str
    base: str
    quote: str
    timespan: str
    base_sentiment: CurrencySentiment
    quote_sentiment: CurrencySentiment
    spread: float
    decision: Decision
    summary: str
    why: str
    headlines: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)
    notes: Tuple[str, ...] = ()

    @property
    def decision_label(self) -> str:
        return self.decision.label

    def to_dict(self) -> Dict[str, Any]:
        """JSON payload in the shape the browser client consumes."""
        base_s, quote_s = self.base_sentiment, self.quote_sentiment
        return {
            "pair": self.pair,
            "timespan": self.timespan,
            "decision": self.decision.value,
            "decisionLabel": self.decision_label,
            "sentiment": {
                "base": self.base,
                "quote": self.quote,
                "baseAvg": base_s.weighted_average,
                "quoteAvg": quote_s.weighted_average,
                "spread": self.spread,
                "highImpact": {
                    "baseCount": base_s.high_impact_count,
                    "quoteCount": quote_s.high_impact_count,
                    "baseGroups": dict(base_s.hit_counts_by_theme),
                    "quoteGroups": dict(quote_s.hit_counts_by_theme),
                },
                "weightMass": {
                    "base": base_s.total_weight_mass,
                    "quote": quote_s.total_weight_mass,
                },
                "topInfluencers": {
                    "base": [i.to_dict() for i in base_s.top_influencers],
                    "quote": [i.to_dict() for i in quote_s.top_influencers],
                },
            },
            "summary": self.summary,
            "why": self.why,
            "headlines": {k: list(v) for k, v in self.headlines.items()},
            "notes": list(self.notes),
        }
