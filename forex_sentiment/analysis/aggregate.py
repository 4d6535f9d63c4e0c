from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..models import Article, CurrencySentiment, Influencer, Theme
from ..processors.classify import BASELINE_WEIGHT, classify
from ..processors.polarity import PolarityScorer
from ..utils.logging import get_logger

logger = get_logger("fxs.analysis.aggregate")

TOP_INFLUENCERS = 3


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def combined_text(article: Article) -> str:
    """Title first, then description; the scorer sees both."""
    parts = [p.strip() for p in (article.title, article.description) if p and p.strip()]
    return ". ".join(parts)


def rank_influencers(candidates: Iterable[Influencer], *, limit: int = TOP_INFLUENCERS) -> List[Influencer]:
    """Order by weight, then by absolute score; both descending."""
    ranked = sorted(candidates, key=lambda i: (-i.weight, -abs(i.score)))
    return ranked[:limit]


def aggregate(
    articles: Iterable[Article],
    *,
    scorer: PolarityScorer,
    themes: Sequence[Theme],
) -> CurrencySentiment:
    """Collapse one currency's article batch into a weighted sentiment summary.

    weighted average = sum(score * weight) / sum(weight)

    Articles with neither title nor description are skipped so that empty
    records cannot drag the average towards zero.
    """
    weight_mass = 0.0
    weighted_sum = 0.0
    high_impact = 0
    used = 0
    hit_counts: Dict[str, int] = {}
    candidates: List[Influencer] = []

    for art in articles:
        if not art.has_text:
            continue
        text = combined_text(art)
        score = scorer.score(text)
        match = classify(art.title, themes)

        weight_mass += match.weight
        weighted_sum += score * match.weight
        used += 1

        if match.weight > BASELINE_WEIGHT:
            high_impact += 1
            for name in match.theme_names:
                hit_counts[name] = hit_counts.get(name, 0) + 1

        candidates.append(
            Influencer(
                title=art.title,
                url=art.url,
                domain=art.domain,
                seen_at=art.seen_at,
                weight=match.weight,
                score=score,
                theme_names=match.theme_names,
            )
        )
        logger.debug("score=%.3f weight=%.2f themes=%s | %s", score, match.weight, match.theme_names, art.title)

    average = clamp(weighted_sum / weight_mass, -1.0, 1.0) if weight_mass > 0 else 0.0

    # report theme counts in catalog order so ties resolve the same way everywhere
    ordered_counts = {t.name: hit_counts[t.name] for t in themes if t.name in hit_counts}

    return CurrencySentiment(
        weighted_average=average,
        high_impact_count=high_impact,
        hit_counts_by_theme=ordered_counts,
        total_weight_mass=round(weight_mass, 2) if weight_mass > 0 else 0.0,
        top_influencers=tuple(rank_influencers(candidates)),
        articles_used=used,
    )
