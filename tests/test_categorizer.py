"""Tests for src.forks.categorizer pattern tables and detection.

Run with coverage:
    pytest tests/test_categorizer.py --maxfail=1 -v --cov=src.forks.categorizer --cov-report=term-missing
"""

import pytest

from src.forks import categorizer
from src.forks.categorizer import CommitCategories, categorize_commit


def test_pattern_tables_are_lowercase():
    for table in (categorizer.FEATURE_PATTERNS, categorizer.BUGFIX_PATTERNS, categorizer.IDEA_PATTERNS):
        assert all(pattern == pattern.lower() for pattern in table)


@pytest.mark.parametrize("message, expected", [
    ("feat: add cache", (True, False, False)),
    ("Implement streaming", (True, False, False)),
    ("FIX: null pointer", (False, True, False)),
    ("Resolve flaky test", (False, True, False)),
    ("refactor: cleanup loop", (False, False, True)),
    ("Simplify config", (False, False, True)),
    ("update docs", (False, False, False)),
    ("update: docs", (False, False, True)),
    ("Merge branch 'main'", (False, False, False)),
    ("", (False, False, False)),
])
def test_categorize_commit(message, expected):
    assert categorize_commit(message) == CommitCategories(*expected)


def test_detection_is_not_exclusive():
    result = categorize_commit("feat: fix the crash and improve: speed")
    assert result.is_feature and result.is_bugfix and result.is_idea


def test_matches_inside_later_lines():
    assert categorize_commit("wip\n\nfixes a crash on startup").is_bugfix


def test_categorize_is_idempotent():
    message = "Enable better error reporting"
    assert categorize_commit(message) == categorize_commit(message)
