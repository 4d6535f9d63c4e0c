"""News retrieval from the GDELT DOC 2.0 API."""

from .gdelt import NewsFetchError, article_from_gdelt, build_gdelt_url, fetch_currency_news, fetch_gdelt_json

__all__ = [
    "NewsFetchError",
    "article_from_gdelt",
    "build_gdelt_url",
    "fetch_currency_news",
    "fetch_gdelt_json",
]
