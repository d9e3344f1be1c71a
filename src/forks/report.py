"""Plain-text reports for a single fork and for the whole run."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .config import REPORT_LIST_LIMIT
from .models import Analysis, Fork, RunSummary

RULE = "=" * 80
SECTION_RULE = "-" * 40


def render_section(title: str, noun: str, labels: Sequence[str], limit: int = REPORT_LIST_LIMIT) -> List[str]:
    """Header with count, the first `limit` labels, then one line for the rest."""
    lines = ["", f"{title} ({len(labels)}):", SECTION_RULE]
    lines.extend(f"  * {label}" for label in labels[:limit])
    hidden = len(labels) - limit
    if hidden > 0:
        lines.append(f"  ... and {hidden} more {noun}")
    return lines


def render_fork_report(fork: Fork, analysis: Analysis, limit: int = REPORT_LIST_LIMIT) -> List[str]:
    lines = [
        "",
        RULE,
        f"FORK: {fork.full_name}",
        RULE,
        f"Stars: {fork.stars} | Forks: {fork.forks}",
        f"Description: {fork.description}",
        f"URL: {fork.url}",
        f"Last Updated: {fork.last_updated}",
        f"Total Commits Analyzed: {len(analysis.commits)}",
    ]

    sections = (
        ("FEATURES", "features", analysis.features),
        ("BUGFIXES", "bugfixes", analysis.bugfixes),
        ("IDEAS & IMPROVEMENTS", "improvements", analysis.ideas),
    )
    for title, noun, labels in sections:
        if labels:
            lines.extend(render_section(title, noun, labels, limit))

    if not analysis.insight_count:
        lines.append("")
        lines.append("No significant changes detected or commits don't follow conventional patterns")
    return lines


def render_summary(summary: RunSummary) -> List[str]:
    """Run-level totals across every analyzed fork."""
    return [
        "",
        RULE,
        "SUMMARY",
        RULE,
        f"Total Forks: {summary.total_forks}",
        f"Analyzed: {summary.analyzed}",
        f"Total Features Found: {summary.total_features}",
        f"Total Bugfixes Found: {summary.total_bugfixes}",
        f"Total Ideas/Improvements Found: {summary.total_ideas}",
        f"Total Insights: {summary.total_insights}",
    ]


def print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


__all__ = ["render_section", "render_fork_report", "render_summary", "print_lines"]
