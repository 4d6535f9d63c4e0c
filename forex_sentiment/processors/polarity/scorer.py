from __future__ import annotations

from numbers import Real
from typing import Optional

from .base import PolarityBackend
from .factory import create_polarity_backend
from ...utils.logging import get_logger

logger = get_logger("fxs.processors.polarity")


class PolarityScorer:
    """Adapter that reduces a backend's score mapping to a single float.

    A missing or non-numeric ``compound`` field scores 0.0 so one odd
    headline cannot fail the whole analysis. Backend exceptions propagate.
    """

    def __init__(self, backend: Optional[PolarityBackend] = None) -> None:
        self.backend = backend if backend is not None else create_polarity_backend()

    def score(self, text: str) -> float:
        result = self.backend.polarity_scores(text)
        compound = result.get("compound") if result else None
        if isinstance(compound, bool) or not isinstance(compound, Real):
            logger.debug("No numeric compound score for %r; treating as neutral", text[:80])
            return 0.0
        value = float(compound)
        # NaN would poison the weighted sums
        if value != value:
            return 0.0
        return value
