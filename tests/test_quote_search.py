# tests/test_quote_search.py
# query-side behaviour: search, highlighting, suggestions and corpus access

import random
import pytest

from corpus import Quote, SearchResult, strip_highlight
from quote_search import MAX_SUGGESTIONS, QuoteSearch


def _ids(results):
    return [r.quote.id for r in results]


def test_empty_query_returns_all_in_corpus_order(quote_search, quotes):
    for query in ("", "   ", "\t"):
        results = quote_search.search(query)
        assert _ids(results) == [q.id for q in quotes]
        assert all(r.highlighted_text == r.quote.text for r in results)


def test_search_is_case_insensitive(quote_search):
    assert _ids(quote_search.search("love")) == [1]
    assert _ids(quote_search.search("LOVE")) == [1]
    assert _ids(quote_search.search("L.o.v.e")) == [1]


def test_search_highlights_matches(quote_search):
    [result] = quote_search.search("love")
    assert isinstance(result, SearchResult)
    assert result.highlighted_text == "The only way to do great work is to <mark>love</mark> what you do."


def test_search_results_sorted_by_id(quote_search):
    assert _ids(quote_search.search("fail")) == [6, 9, 13]


def test_unmatched_prefix_returns_empty(quote_search):
    assert quote_search.search("xyzzyqqq") == []


def test_punctuation_only_query_matches_nothing(quote_search):
    assert quote_search.search("?!") == []


def test_prefix_monotonicity(quote_search):
    word = "failure"
    for i in range(1, len(word)):
        longer = set(_ids(quote_search.search(word[:i + 1])))
        shorter = set(_ids(quote_search.search(word[:i])))
        assert longer <= shorter


def test_single_letter_query_matches_longer_words_only(quote_search):
    assert 5 in _ids(quote_search.search("a"))  # "Aristotle"

    index = QuoteSearch([Quote(1, "A cat", "Zed")])
    assert index.search("a") == []


def test_author_match_without_text_highlight(quote_search):
    [result] = quote_search.search("aristotle")
    assert result.quote.id == 5
    assert "<mark>" not in result.highlighted_text


def test_highlight_keeps_original_casing_and_punctuation(quote_search):
    text = "You learn more from failure than from success. Don't let it stop you. Failure builds character."
    assert quote_search.highlight(text, "fail") == (
        "You learn more from <mark>failure</mark> than from success. "
        "Don't let it stop you. <mark>Failure</mark> builds character."
    )
    assert quote_search.highlight(text, "dont") == text.replace("Don't", "<mark>Don't</mark>")


def test_highlight_preserves_whitespace_runs(quote_search):
    text = "  love \t lovely\nloved  "
    assert quote_search.highlight(text, "love") == "  <mark>love</mark> \t <mark>lovely</mark>\n<mark>loved</mark>  "


def test_highlight_empty_query_matches_nothing(quote_search):
    assert quote_search.highlight("Some text.", "") == "Some text."
    assert quote_search.highlight("Some text.", "...") == "Some text."


def test_highlight_round_trip(quote_search, quotes):
    for query in ("the", "a", "wo", "you", "don", "xyz", "Success"):
        for quote in quotes:
            assert strip_highlight(quote_search.highlight(quote.text, query)) == quote.text


def test_suggestions_capped_and_prefixed(quote_search):
    for prefix in ("t", "th", "b", "be", "wo", "s", "xyz", ""):
        suggestions = quote_search.get_suggestions(prefix)
        assert len(suggestions) <= MAX_SUGGESTIONS
        assert all(s.startswith(prefix.lower()) for s in suggestions)


def test_suggestions_order(quote_search):
    assert quote_search.get_suggestions("be") == ["be", "beauty", "become", "been", "begin"]
    assert quote_search.get_suggestions("Wo") == ["won", "work", "working", "world", "worth"]


def test_suggestions_empty_prefix(quote_search):
    assert quote_search.get_suggestions("") == []
    assert quote_search.get_suggestions("   ") == []


def test_random_quote_uses_injected_rng(quotes):
    index = QuoteSearch(quotes, rng=random.Random(42))
    expected_rng = random.Random(42)
    for _ in range(10):
        assert index.random_quote() == quotes[expected_rng.randrange(len(quotes))]


def test_random_quote_empty_corpus():
    with pytest.raises(ValueError):
        QuoteSearch([]).random_quote()


def test_all_quotes_is_a_copy(quote_search, quotes):
    everything = quote_search.all_quotes()
    assert everything == quotes
    everything.clear()
    assert len(quote_search.all_quotes()) == 25


def test_get_quote(quote_search):
    assert quote_search.get_quote(13).author == "Thomas A. Edison"
    assert quote_search.get_quote(999) is None


def test_missing_id_is_skipped(quote_search, capsys):
    quote_search.trie.insert("ghostword", 999)
    quote_search.trie.insert("ghosts", 1)
    assert _ids(quote_search.search("ghost")) == [1]
    assert "AVISO" in capsys.readouterr().out


def test_build_is_deterministic(quotes):
    first = QuoteSearch(quotes)
    second = QuoteSearch(quotes)
    for query in ("", "a", "the", "be", "wo", "love", "xyz", "Don't"):
        assert first.search(query) == second.search(query)
        assert first.get_suggestions(query) == second.get_suggestions(query)
