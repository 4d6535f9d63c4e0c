from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class PolarityBackend(ABC):
    """Abstract per-text sentiment scorer."""

    @abstractmethod
    def polarity_scores(self, text: str) -> Mapping[str, Any]:
        """Return a mapping that carries at least a ``compound`` polarity in [-1, 1]."""
