"""Reduce categorized commits to one label list per category."""

from __future__ import annotations

from typing import Iterable

from .categorizer import categorize_commit
from .models import Analysis, Commit


def commit_label(commit: Commit) -> str:
    """Render a commit as `[author] first-line` for the category lists."""
    return f"[{commit.author}] {commit.first_line}"


def analyze_commits(commits: Iterable[Commit]) -> Analysis:
    """Assign each commit to at most one category: feature > bugfix > idea.

    Unmatched commits are kept in `commits` but produce no label.
    """
    analysis = Analysis()
    for commit in commits:
        category = categorize_commit(commit.message)
        if category.is_feature:
            analysis.features.append(commit_label(commit))
        elif category.is_bugfix:
            analysis.bugfixes.append(commit_label(commit))
        elif category.is_idea:
            analysis.ideas.append(commit_label(commit))
        analysis.commits.append(commit)
    return analysis


__all__ = ["commit_label", "analyze_commits"]
