"""Per-text polarity backends (VADER) and the scorer adapter used by the aggregator."""

from .base import PolarityBackend
from .factory import create_polarity_backend
from .scorer import PolarityScorer

__all__ = ["PolarityBackend", "PolarityScorer", "create_polarity_backend"]
