"""Typed models used across the application."""

from .article import Article
from .catalog import Catalog, CurrencyProfile, Theme, ThemeMatch
from .sentiment import AnalysisResult, CurrencySentiment, Decision, Influencer

__all__ = [
    "Article",
    "Catalog",
    "CurrencyProfile",
    "Theme",
    "ThemeMatch",
    "AnalysisResult",
    "CurrencySentiment",
    "Decision",
    "Influencer",
]
