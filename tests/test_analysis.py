"""Tests for src.forks.analysis precedence and label rendering.

Run with coverage:
    pytest tests/test_analysis.py --maxfail=1 -v --cov=src.forks.analysis --cov-report=term-missing
"""

from src.forks.analysis import analyze_commits, commit_label
from src.forks.models import Commit


def _commit(message, author="A", sha="s"):
    return Commit(sha=sha, message=message, author=author, date="2024-01-01T00:00:00Z")


def test_label_uses_first_line_only():
    assert commit_label(_commit("feat: x\n\nlong body", author="dev")) == "[dev] feat: x"


def test_mixed_messages_scenario():
    messages = ["fix: null pointer", "feat: add cache", "refactor: cleanup loop", "update docs"]
    commits = [_commit(msg, sha=str(i)) for i, msg in enumerate(messages)]
    analysis = analyze_commits(commits)
    assert analysis.features == ["[A] feat: add cache"]
    assert analysis.bugfixes == ["[A] fix: null pointer"]
    assert analysis.ideas == ["[A] refactor: cleanup loop"]
    assert analysis.commits == commits
    assert analysis.insight_count == 3


def test_feature_wins_over_bugfix_and_idea():
    analysis = analyze_commits([_commit("feat: fix the thing"), _commit("fix: refactor: it")])
    assert analysis.features == ["[A] feat: fix the thing"]
    assert analysis.bugfixes == ["[A] fix: refactor: it"]
    assert analysis.ideas == []


def test_order_is_preserved():
    commits = [_commit(f"fix: bug {i}", sha=str(i)) for i in range(5)]
    analysis = analyze_commits(commits)
    assert analysis.bugfixes == [f"[A] fix: bug {i}" for i in range(5)]


def test_empty_input():
    analysis = analyze_commits([])
    assert analysis.commits == [] and analysis.insight_count == 0
