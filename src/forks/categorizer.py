"""Commit-message heuristics for spotting features, bugfixes, and improvement ideas."""

from __future__ import annotations

from typing import Iterable, NamedTuple

FEATURE_PATTERNS = (
    "feat:", "feature:", "add:", "implement", "new:", "enhancement:",
    "support for", "introduce", "enable", "allow",
)

BUGFIX_PATTERNS = (
    "fix:", "bug:", "patch:", "hotfix:", "repair", "resolve", "correct",
    "issue", "problem", "error", "crash", "failure",
)

# "update:" keeps its colon: "update docs" is not an idea.
IDEA_PATTERNS = (
    "improve:", "refactor:", "optimize:", "performance:", "cleanup:",
    "update:", "upgrade:", "modernize", "simplify", "enhance", "better",
)


class CommitCategories(NamedTuple):
    is_feature: bool
    is_bugfix: bool
    is_idea: bool


def matches_any(text: str, patterns: Iterable[str]) -> bool:
    return any(pattern in text for pattern in patterns)


def categorize_commit(message: str) -> CommitCategories:
    """Detect each category independently; a message may match several."""
    lowered = (message or "").lower()
    return CommitCategories(
        is_feature=matches_any(lowered, FEATURE_PATTERNS),
        is_bugfix=matches_any(lowered, BUGFIX_PATTERNS),
        is_idea=matches_any(lowered, IDEA_PATTERNS),
    )


__all__ = [
    "FEATURE_PATTERNS",
    "BUGFIX_PATTERNS",
    "IDEA_PATTERNS",
    "CommitCategories",
    "matches_any",
    "categorize_commit",
]
