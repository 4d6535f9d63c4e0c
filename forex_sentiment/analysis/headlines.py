from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..models import Article


def pick_top_headlines(articles: Iterable[Article], limit: int = 10) -> List[Dict[str, Any]]:
    """First ``limit`` titled articles in retrieval order, as display records."""
    picked: List[Dict[str, Any]] = []
    for art in articles:
        if len(picked) >= limit:
            break
        if not art.title:
            continue
        picked.append(
            {
                "title": art.title,
                "url": art.url,
                "sourceCountry": art.source_country,
                "language": art.language,
                "seendate": art.seen_at.isoformat() if art.seen_at else None,
                "domain": art.domain,
            }
        )
    return picked
