from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List

import yaml

from ..models import Catalog, CurrencyProfile, Theme


class ConfigError(Exception):
    """Raised when the catalog file is invalid or missing required fields."""


REQUIRED_THEME_FIELDS = {"name", "weight", "terms"}

_CODE_RE = re.compile(r"^[A-Z]{3}$")


def _string_list(value: object, what: str) -> List[str]:
    if not isinstance(value, list) or not value:
        raise ConfigError(f"{what} must be a non-empty list of strings")
    items = [str(v).strip() for v in value if isinstance(v, str)]
    if len(items) != len(value) or not all(items):
        raise ConfigError(f"{what} must contain only non-empty strings")
    return items


def _coerce_theme(entry: dict) -> Theme:
    """Validate a single theme mapping from YAML.

    Required fields: name (str), weight (number > 1.0), terms (list[str]).
    """
    missing = REQUIRED_THEME_FIELDS - set(entry)
    if missing:
        raise ConfigError(f"Missing required fields: {sorted(missing)} in {entry}")

    name = str(entry["name"]).strip()
    if not name:
        raise ConfigError("Theme name must not be empty")

    raw_weight = entry["weight"]
    if isinstance(raw_weight, bool) or not isinstance(raw_weight, (int, float)):
        raise ConfigError(f"Theme '{name}' weight must be a number, got {raw_weight!r}")
    weight = float(raw_weight)
    # a weight of 1.0 would never count as high impact
    if weight <= 1.0:
        raise ConfigError(f"Theme '{name}' weight must be greater than 1.0, got {weight}")

    terms = _string_list(entry["terms"], f"Theme '{name}' terms")
    return Theme(name=name, weight=weight, terms=tuple(terms))


def _coerce_currencies(raw: object) -> Dict[str, CurrencyProfile]:
    if not isinstance(raw, dict) or not raw:
        raise ConfigError("'currencies' must be a non-empty mapping of code -> terms")
    profiles: Dict[str, CurrencyProfile] = {}
    for code, entry in raw.items():
        code_str = str(code).strip().upper()
        if not _CODE_RE.match(code_str):
            raise ConfigError(f"Invalid currency code '{code}'. Must be 3 letters.")
        terms = entry.get("terms") if isinstance(entry, dict) else entry
        profiles[code_str] = CurrencyProfile(
            code=code_str,
            terms=tuple(_string_list(terms, f"Currency '{code_str}' terms")),
        )
    return profiles


def catalog_from_dict(data: dict) -> Catalog:
    """Build a validated ``Catalog`` from an already-parsed mapping."""
    themes_raw = data.get("themes") or []
    if not isinstance(themes_raw, list) or not themes_raw:
        raise ConfigError("'themes' must be a non-empty list in the YAML configuration")

    themes: List[Theme] = []
    seen: set[str] = set()
    for item in themes_raw:
        if not isinstance(item, dict):
            raise ConfigError(f"Each theme must be a mapping, got: {type(item)}")
        theme = _coerce_theme(item)
        if theme.name in seen:
            raise ConfigError(f"Duplicate theme name '{theme.name}'")
        seen.add(theme.name)
        themes.append(theme)

    currencies = _coerce_currencies(data.get("currencies"))
    econ_terms = _string_list(data.get("econ_terms"), "'econ_terms'")

    pairs: List[str] = []
    for raw_pair in data.get("pairs") or []:
        pair = str(raw_pair).strip().upper()
        if len(pair) != 6 or pair[:3] not in currencies or pair[3:] not in currencies:
            raise ConfigError(f"Pair '{raw_pair}' must join two configured currencies, e.g. EURUSD")
        pairs.append(pair)

    return Catalog(
        themes=tuple(themes),
        currencies=currencies,
        econ_terms=tuple(econ_terms),
        pairs=tuple(pairs),
    )


def load_catalog(path: Path | str) -> Catalog:
    """Load ``catalog.yaml`` into an immutable ``Catalog``.

    YAML structure:
      - ``themes``: list of mappings with ``name``, ``weight`` (> 1.0) and
        ``terms`` (case-insensitive substrings); order defines tie-breaking
      - ``currencies``: mapping of 3-letter code to ``{terms: [...]}``
      - ``econ_terms``: list of strings AND-ed into every news query
      - ``pairs``: optional list of 6-letter pairs offered by ``--list-pairs``

    Unknown top-level keys are ignored for forward compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError("Catalog file must contain a top-level mapping")
    return catalog_from_dict(data)
