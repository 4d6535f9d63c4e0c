from __future__ import annotations

import json
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from ..models import Article, Catalog
from ..processors.normalize import clean_html_to_text, normalize_plain_text, parse_seendate
from ..processors.query import make_currency_query
from ..utils.logging import get_logger
from ..utils.pipeline_config import GDELT_DOC_API, AnalysisSettings

logger = get_logger("fxs.fetchers.gdelt")

_DEFAULT_HEADERS = {
    "User-Agent": "forex-sentiment/0.1 (+https://www.gdeltproject.org/)",
    "Accept": "application/json",
}


class NewsFetchError(Exception):
    """GDELT answered, but not with a usable article list."""


def build_gdelt_url(
    query: str,
    *,
    timespan: str = "24h",
    max_records: int = 30,
    sort: str = "datedesc",
    base_url: str = GDELT_DOC_API,
) -> str:
    params = {
        "query": query,
        "mode": "artlist",
        "format": "json",
        "timespan": timespan,
        "maxrecords": str(max_records),
        "sort": sort,
    }
    return f"{base_url}?{urlencode(params)}"


def fetch_gdelt_json(url: str, *, timeout: float = 12.0) -> Dict[str, Any]:
    """GET ``url`` and decode the JSON body.

    GDELT replies to rejected or rate-limited queries with plain text, so a
    non-JSON body is reported as an error instead of an empty result.
    """
    logger.debug("Fetching GDELT %s", url)
    try:
        resp = requests.get(url, headers=_DEFAULT_HEADERS, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("GDELT request error for %s: %s", url, exc)
        raise

    text = resp.text or ""
    if resp.status_code >= 400:
        logger.warning("GDELT fetch failed (%s): %s", resp.status_code, url)
        raise NewsFetchError(f"GDELT HTTP {resp.status_code}: {text[:200]}")

    try:
        payload = json.loads(text)
    except ValueError:
        raise NewsFetchError(
            f"GDELT returned non-JSON (likely query rejected / rate limited). Snippet: {text[:200]}"
        ) from None

    if not isinstance(payload, dict):
        raise NewsFetchError(f"GDELT returned unexpected JSON type: {type(payload).__name__}")
    return payload


def article_from_gdelt(raw: Dict[str, Any]) -> Article:
    title = normalize_plain_text(clean_html_to_text(raw.get("title")))
    description = normalize_plain_text(clean_html_to_text(raw.get("description"))) or None
    return Article(
        title=title,
        url=str(raw.get("url") or ""),
        description=description,
        domain=str(raw.get("domain") or ""),
        source_country=str(raw.get("sourcecountry") or raw.get("sourceCountry") or ""),
        language=str(raw.get("language") or ""),
        seen_at=parse_seendate(raw.get("seendate")),
    )


def fetch_currency_news(
    code: str,
    timespan: str,
    *,
    catalog: Catalog,
    settings: Optional[AnalysisSettings] = None,
) -> List[Article]:
    """Fetch the most recent themed articles for one currency.

    Retrieval errors propagate unchanged; no synthetic fallback data.
    """
    settings = settings or AnalysisSettings.from_env()
    query = make_currency_query(code, catalog)
    url = build_gdelt_url(
        query,
        timespan=timespan,
        max_records=settings.max_records,
        sort="datedesc",
        base_url=settings.gdelt_base_url,
    )
    payload = fetch_gdelt_json(url, timeout=settings.timeout_seconds)

    if payload.get("error"):
        raise NewsFetchError(f"GDELT error: {payload['error']}")

    raw_articles = payload.get("articles")
    if not isinstance(raw_articles, list):
        raw_articles = []

    articles = [article_from_gdelt(a) for a in raw_articles if isinstance(a, dict)]
    logger.info("Fetched %d GDELT articles for %s (%s)", len(articles), code, timespan)
    return articles
