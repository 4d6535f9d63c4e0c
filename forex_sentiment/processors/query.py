from __future__ import annotations

import re

from ..models import Catalog

_non_word_re = re.compile(r"[^\w]", re.ASCII)


def quote_if_needed(term: str) -> str:
    t = str(term).strip()
    if t and _non_word_re.search(t):
        return f'"{t}"'
    return t


def make_currency_query(code: str, catalog: Catalog) -> str:
    """Build a short GDELT query: (currency terms) AND (econ terms).

    Kept short on purpose; long boolean queries get rejected upstream.
    """
    profile = catalog.currencies.get(code)
    terms = list(profile.terms) if profile and profile.terms else [code]
    left = " OR ".join(quote_if_needed(t) for t in terms)
    right = " OR ".join(quote_if_needed(t) for t in catalog.econ_terms)
    return f"({left}) AND ({right})"
