from __future__ import annotations

from pathlib import Path
from typing import Dict

import pytest

from forex_sentiment.models import Catalog, Theme
from forex_sentiment.processors.polarity import PolarityScorer
from forex_sentiment.utils.config_loader import load_catalog

from .helpers import FakeBackend

CATALOG_PATH = Path(__file__).resolve().parents[1] / "config" / "catalog.yaml"


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    return load_catalog(CATALOG_PATH)


@pytest.fixture
def themes_ab() -> tuple:
    return (
        Theme(name="A", weight=2.0, terms=("alpha", "apple")),
        Theme(name="B", weight=2.3, terms=("beta",)),
    )


@pytest.fixture
def make_scorer():
    def _make(scores: Dict[str, float] | None = None) -> PolarityScorer:
        return PolarityScorer(FakeBackend(scores))

    return _make
