"""Pytest fixtures for Sildish tests."""

import logging
import tempfile
from pathlib import Path

import pytest

from sildish.transliterate import get_transliteration_tree
from sildish.tree.prefix_tree import PrefixTree


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_logger() -> logging.Logger:
    """Logger that propagates to pytest's caplog."""
    logger = logging.getLogger("sildish_test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def schema_dir():
    """Path to schemas directory."""
    return Path(__file__).parent.parent / "etc" / "schemas"


@pytest.fixture
def tree():
    """The shared transliteration tree."""
    return get_transliteration_tree()


@pytest.fixture
def article_tree():
    """Small word tree with nested keys."""
    return PrefixTree.build_all(
        {
            "a": "indefinite article",
            "an": "indefinite article",
            "the": "definite article",
        }
    )
