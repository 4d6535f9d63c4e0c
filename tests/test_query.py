from forex_sentiment.processors.query import make_currency_query, quote_if_needed


def test_quote_if_needed() -> None:
    assert quote_if_needed("Fed") == "Fed"
    assert quote_if_needed(" central bank ") == '"central bank"'
    assert quote_if_needed("S&P") == '"S&P"'
    assert quote_if_needed("") == ""


def test_currency_query_shape(catalog) -> None:
    query = make_currency_query("USD", catalog)
    assert query == (
        '(USD OR dollar OR Fed OR FOMC OR Treasury) AND (rates OR inflation OR GDP OR "central bank")'
    )


def test_unknown_code_falls_back_to_code(catalog) -> None:
    assert make_currency_query("SEK", catalog).startswith("(SEK) AND (")
