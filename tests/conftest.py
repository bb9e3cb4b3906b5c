# tests/conftest.py
# fixtures shared by the whole suite: the seed corpus and a built index

import os
import pytest

from corpus import load_quotes
from quote_search import QuoteSearch

QUOTES_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "quotes.json")


@pytest.fixture
def quotes():
    return load_quotes(QUOTES_FILE)


@pytest.fixture
def quote_search(quotes):
    return QuoteSearch(quotes)
