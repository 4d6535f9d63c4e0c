from __future__ import annotations

from typing import List, Sequence

from ..models import Theme, ThemeMatch

BASELINE_WEIGHT = 1.0


def classify(title: str | None, themes: Sequence[Theme]) -> ThemeMatch:
    """Match a headline against the theme catalog.

    Every theme is checked independently; the first matching term is enough
    for a theme to count. The resulting weight is the maximum over matched
    themes, not the sum, so keyword-dense headlines cannot run away.
    """
    text = (title or "").lower()
    if not text:
        return ThemeMatch(weight=BASELINE_WEIGHT, theme_names=())

    weight = BASELINE_WEIGHT
    names: List[str] = []
    for theme in themes:
        if any(term.lower() in text for term in theme.terms):
            weight = max(weight, theme.weight)
            if theme.name not in names:
                names.append(theme.name)
    return ThemeMatch(weight=weight, theme_names=tuple(names))
