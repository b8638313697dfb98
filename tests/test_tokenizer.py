# tests/test_tokenizer.py

from hypothesis import given, strategies as st

from docsearch.application.tokenizer import parse_query, tokenize


def test_splits_on_whitespace_runs():
    assert tokenize("  foo   bar ") == ["foo", "bar"]


def test_blank_input_yields_no_terms():
    assert tokenize("") == []
    assert tokenize("   \t\n ") == []


def test_tabs_and_newlines_are_separators():
    assert tokenize("alpha\tbeta\ngamma") == ["alpha", "beta", "gamma"]


def test_terms_keep_case_order_and_duplicates():
    assert tokenize("Cat dog CAT") == ["Cat", "dog", "CAT"]


def test_punctuation_stays_inside_terms():
    assert tokenize("a.b*c (x|y)") == ["a.b*c", "(x|y)"]


def test_parse_query_marks_blank_queries_empty():
    assert parse_query("   ").is_empty
    assert parse_query("   ").terms == ()

    query = parse_query(" machine learning ")
    assert not query.is_empty
    assert query.raw == " machine learning "
    assert query.terms == ("machine", "learning")


@given(st.text())
def test_terms_are_non_empty_and_whitespace_free(raw):
    terms = tokenize(raw)
    assert all(terms)
    assert not any(any(ch.isspace() for ch in term) for term in terms)
