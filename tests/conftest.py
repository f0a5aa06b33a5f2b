"""Pytest configuration and fixtures."""

import copy
import os

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Isolate environment variables for each test.

    This prevents test pollution where one test's environment
    changes affect other tests.
    """
    # Save current environment
    original_env = os.environ.copy()

    monkeypatch.delenv("BIBCITE_STYLE", raising=False)
    monkeypatch.delenv("BIBCITE_LANG", raising=False)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def article_a():
    """Journal article from 2020."""
    return {
        "id": "a",
        "type": "article-journal",
        "title": "X",
        "author": [{"family": "Smith", "given": "John"}],
        "issued": {"date-parts": [[2020]]},
        "container-title": "Journal of Tests",
        "volume": "12",
        "issue": "3",
        "page": "1-10",
    }


@pytest.fixture
def article_b(article_a):
    """Journal article by the same author from 2019."""
    entry = copy.deepcopy(article_a)
    entry.update(id="b", title="Y", issued={"date-parts": [[2019]]})
    return entry


@pytest.fixture
def sample_entries(article_a, article_b):
    """Two entries in collection order a, b."""
    return [article_a, article_b]


@pytest.fixture
def book_entry():
    """Book with an edition and a publisher."""
    return {
        "id": "knuth1997",
        "type": "book",
        "title": "The Art of Computer Programming",
        "author": [{"family": "Knuth", "given": "Donald Ervin"}],
        "issued": {"date-parts": [[1997, 7]]},
        "edition": "3",
        "publisher": "Addison-Wesley",
        "publisher-place": "Reading, MA",
    }


@pytest.fixture
def numeric_template():
    """Minimal numeric style sorting by year."""
    return (
        '{"info": {"id": "by-year", "citation-format": "numeric"},'
        ' "bibliography": {"sort": [{"key": "issued"}],'
        ' "parts": [{"variable": "title"}]}}'
    )
