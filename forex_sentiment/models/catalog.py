from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True, slots=True)
class Theme:
    """Macro-economic headline theme with a weight multiplier and trigger terms."""

    name: str
    weight: float
    terms: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ThemeMatch:
    weight: float = 1.0
    theme_names: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CurrencyProfile:
    code: str
    terms: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Catalog:
    """Load-once configuration shared by the classifier and the query builder."""

    themes: Tuple[Theme, ...]
    currencies: Dict[str, CurrencyProfile] = field(default_factory=dict)
    econ_terms: Tuple[str, ...] = ()
    pairs: Tuple[str, ...] = ()

    def supports(self, code: str) -> bool:
        return code in self.currencies

    @property
    def supported_codes(self) -> Tuple[str, ...]:
        return tuple(self.currencies)
