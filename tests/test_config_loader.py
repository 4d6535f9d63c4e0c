import pytest

from forex_sentiment.utils.config_loader import ConfigError, catalog_from_dict, load_catalog


def _base() -> dict:
    return {
        "themes": [{"name": "Rates", "weight": 2.6, "terms": ["rate hike"]}],
        "currencies": {"USD": {"terms": ["dollar"]}, "EUR": {"terms": ["euro"]}},
        "econ_terms": ["rates"],
        "pairs": ["eurusd"],
    }


def test_shipped_catalog_loads(catalog) -> None:
    assert [t.name for t in catalog.themes][:2] == ["Rates/Decision", "CPI/Inflation"]
    assert catalog.themes[0].weight == 2.6
    assert len(catalog.currencies) == 8
    assert catalog.pairs[0] == "EURUSD"
    assert all(t.weight > 1.0 for t in catalog.themes)


def test_catalog_from_dict() -> None:
    cat = catalog_from_dict(_base())
    assert cat.pairs == ("EURUSD",)
    assert cat.currencies["USD"].terms == ("dollar",)
    assert cat.themes[0].terms == ("rate hike",)


def test_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_catalog(tmp_path / "nope.yaml")


def test_load_from_yaml(tmp_path) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "themes:\n  - {name: Jobs, weight: 2.3, terms: [payrolls]}\n"
        "currencies:\n  GBP: {terms: [sterling]}\n"
        "econ_terms: [inflation]\n",
        encoding="utf-8",
    )
    cat = load_catalog(path)
    assert cat.supported_codes == ("GBP",)
    assert cat.pairs == ()


@pytest.mark.parametrize(
    "mutate, message",
    [
        (lambda d: d["themes"][0].update(weight=1.0), "greater than 1.0"),
        (lambda d: d["themes"][0].update(weight="heavy"), "must be a number"),
        (lambda d: d["themes"][0].pop("terms"), "Missing required fields"),
        (lambda d: d["themes"][0].update(terms=[]), "non-empty list"),
        (lambda d: d["themes"].append(dict(d["themes"][0])), "Duplicate theme"),
        (lambda d: d.update(themes=[]), "'themes'"),
        (lambda d: d["currencies"].update({"EURO": {"terms": ["x"]}}), "Invalid currency code"),
        (lambda d: d.update(pairs=["EURJPY"]), "two configured currencies"),
        (lambda d: d.update(econ_terms=None), "econ_terms"),
    ],
)
def test_invalid_catalogs(mutate, message) -> None:
    data = _base()
    mutate(data)
    with pytest.raises(ConfigError, match=message):
        catalog_from_dict(data)
