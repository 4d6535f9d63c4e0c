from forex_sentiment.models import Theme
from forex_sentiment.processors.classify import classify


def test_no_theme_weight_is_baseline(catalog) -> None:
    match = classify("Quiet day, no major news", catalog.themes)
    assert match.weight == 1.0
    assert match.theme_names == ()


def test_empty_and_none_title() -> None:
    themes = (Theme(name="A", weight=2.0, terms=("alpha",)),)
    assert classify("", themes).weight == 1.0
    assert classify(None, themes).theme_names == ()


def test_weight_is_max_not_sum(themes_ab) -> None:
    match = classify("Alpha meets Beta", themes_ab)
    assert match.weight == 2.3
    assert set(match.theme_names) == {"A", "B"}


def test_case_insensitive_and_one_hit_per_theme(themes_ab) -> None:
    match = classify("ALPHA and apple and alpha again", themes_ab)
    assert match.weight == 2.0
    assert match.theme_names == ("A",)


def test_catalog_example_headline(catalog) -> None:
    match = classify("Fed signals rate hike amid inflation surge", catalog.themes)
    assert match.weight == 2.6
    assert "Rates/Decision" in match.theme_names
    assert "CPI/Inflation" in match.theme_names


def test_every_theme_checked_independently(catalog) -> None:
    match = classify("PMI beats as GDP growth picks up", catalog.themes)
    assert match.theme_names == ("GDP/Growth", "PMI/Activity")
    assert match.weight == 2.1
