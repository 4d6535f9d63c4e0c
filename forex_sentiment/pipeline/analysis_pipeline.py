from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, Tuple

from ..analysis import aggregate, build_summary, build_why, decide, pick_top_headlines
from ..fetchers import fetch_currency_news
from ..models import AnalysisResult, Article, Catalog
from ..processors.polarity import PolarityScorer
from ..utils.logging import get_logger
from ..utils.pipeline_config import AnalysisSettings

logger = get_logger("fxs.pipeline.analysis")

FetchFn = Callable[[str, str], Sequence[Article]]

NOTES = (
    "Weighted sentiment: headlines with high-impact macro terms are weighted more.",
    "Spread = base weighted sentiment minus quote weighted sentiment.",
)

# GDELT timespan syntax: 15min, 24h, 7d, 2w, 3m
_TIMESPAN_RE = re.compile(r"^[1-9]\d*(min|h|d|w|m)$")


class InputValidationError(ValueError):
    """Request rejected before any news is fetched."""


class InvalidPairError(InputValidationError):
    pass


class UnsupportedCurrencyError(InputValidationError):
    pass


def parse_pair(raw: str | None, catalog: Catalog) -> Tuple[str, str, str]:
    """Split ``eurusd`` into ("EURUSD", "EUR", "USD")."""
    pair = str(raw or "").upper().strip()
    if len(pair) != 6:
        raise InvalidPairError("Provide pair like EURUSD")
    base, quote = pair[:3], pair[3:]
    if not catalog.supports(base) or not catalog.supports(quote):
        raise UnsupportedCurrencyError(
            f"Unsupported currency in pair. Supported: {', '.join(catalog.supported_codes)}"
        )
    return pair, base, quote


def validate_timespan(raw: str | None, default: str = "24h") -> str:
    timespan = str(raw or "").strip().lower() or default
    if not _TIMESPAN_RE.match(timespan):
        raise InputValidationError(f"Invalid timespan '{raw}'. Use forms like 15min, 24h, 7d, 2w.")
    return timespan


def build_analysis_result(
    pair: str,
    base: str,
    quote: str,
    timespan: str,
    base_articles: Sequence[Article],
    quote_articles: Sequence[Article],
    *,
    catalog: Catalog,
    scorer: PolarityScorer,
    headline_limit: int = 10,
) -> AnalysisResult:
    """Pure part of the analysis: two article batches in, one decision out."""
    base_s = aggregate(base_articles, scorer=scorer, themes=catalog.themes)
    quote_s = aggregate(quote_articles, scorer=scorer, themes=catalog.themes)

    spread, decision = decide(base_s, quote_s)
    logger.info(
        "%s: %s=%.3f (%d used) %s=%.3f (%d used) spread=%.3f -> %s",
        pair,
        base,
        base_s.weighted_average,
        base_s.articles_used,
        quote,
        quote_s.weighted_average,
        quote_s.articles_used,
        spread,
        decision.value,
    )

    return AnalysisResult(
        pair=pair,
        base=base,
        quote=quote,
        timespan=timespan,
        base_sentiment=base_s,
        quote_sentiment=quote_s,
        spread=spread,
        decision=decision,
        summary=build_summary(pair, base, quote, base_s, quote_s, spread, decision),
        why=build_why(base, quote, base_s, quote_s, spread, decision),
        headlines={
            "base": pick_top_headlines(base_articles, headline_limit),
            "quote": pick_top_headlines(quote_articles, headline_limit),
        },
        notes=NOTES,
    )


def analyze_pair(
    pair: str,
    timespan: str | None = None,
    *,
    catalog: Catalog,
    scorer: Optional[PolarityScorer] = None,
    fetch: Optional[FetchFn] = None,
    settings: Optional[AnalysisSettings] = None,
) -> AnalysisResult:
    """Fetch both sides of ``pair`` concurrently, then score and decide.

    Validation errors are raised before any network call. A failed fetch on
    either side propagates unchanged; there is no partial result.
    """
    settings = settings or AnalysisSettings.from_env()
    pair_code, base, quote = parse_pair(pair, catalog)
    span = validate_timespan(timespan, settings.default_timespan)

    if fetch is None:
        def fetch(code: str, ts: str) -> List[Article]:
            return fetch_currency_news(code, ts, catalog=catalog, settings=settings)

    if scorer is None:
        scorer = PolarityScorer()

    logger.info("Analyzing %s over %s", pair_code, span)
    with ThreadPoolExecutor(max_workers=2) as executor:
        base_future = executor.submit(fetch, base, span)
        quote_future = executor.submit(fetch, quote, span)
        # result() re-raises the worker's exception as-is
        base_articles = list(base_future.result())
        quote_articles = list(quote_future.result())

    return build_analysis_result(
        pair_code,
        base,
        quote,
        span,
        base_articles,
        quote_articles,
        catalog=catalog,
        scorer=scorer,
        headline_limit=settings.headline_limit,
    )
