"""Entry points for analyzing the forks of a GitHub repository."""

from __future__ import annotations

import sys
import time
from dataclasses import replace
from typing import Callable, List, Optional

import requests

from .analysis import analyze_commits
from .collectors import CommitFetchFailure, get_commits, get_forks
from .config import AnalysisSettings, build_arg_parser, parse_args, resolve_settings
from .http_client import DecodeFailure
from .models import Analysis, Fork, RunSummary
from .ranking import rank_forks
from .refs import InvalidReferenceFormat, RepositoryRef, parse_repo_reference
from .report import print_lines, render_fork_report, render_summary


def analyze_fork(fork: Fork, settings: AnalysisSettings) -> Optional[Analysis]:
    """Fetch and categorize a fork's recent commits; None when they are unavailable."""
    try:
        commits = get_commits(
            fork.owner,
            fork.name,
            fork.default_branch,
            settings.token,
            since=settings.since,
            max_pages=settings.max_commit_pages,
        )
    except CommitFetchFailure as exc:
        print(f"[error] Could not fetch commits for {fork.full_name} ({exc.reason})")
        return None
    return analyze_commits(commits)


def analyze_repository(ref: RepositoryRef,
                       settings: AnalysisSettings,
                       sleep: Callable[[float], None] = time.sleep) -> RunSummary:
    """Rank the forks of `ref`, report on the top ones, and return the run totals."""
    print(f"[info] Analyzing forks of {ref.full_name}...")
    print("  fetching forks...")
    forks = get_forks(ref.owner, ref.name, settings.token)
    if not forks:
        print("No forks found for this repository")
        return RunSummary()

    print(f"  found {len(forks)} forks")
    selected = rank_forks(forks, settings.max_forks)
    print(f"  analyzing top {len(selected)} most active forks...")

    summary = RunSummary(total_forks=len(forks))
    for index, fork in enumerate(selected, start=1):
        print(f"\n  analyzing {fork.full_name} ({index}/{len(selected)})...")
        analysis = analyze_fork(fork, settings)
        summary = replace(summary, analyzed=summary.analyzed + 1)
        if analysis is not None:
            print_lines(render_fork_report(fork, analysis))
            summary = summary.add(analysis)
        sleep(settings.fork_delay_sec)

    print_lines(render_summary(summary))
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""
    argv = list(sys.argv[1:] if argv is None else argv)
    missing = not argv or not argv[0].strip()
    if missing or argv[0] in ("-h", "--help", "help"):
        build_arg_parser().print_help()
        return 1 if missing else 0

    settings = resolve_settings(parse_args(argv))
    try:
        ref = parse_repo_reference(settings.repository)
        analyze_repository(ref, settings)
    except (InvalidReferenceFormat, DecodeFailure) as exc:
        print(f"[error] {exc}")
        return 1
    except requests.RequestException as exc:
        print(f"[error] request failed: {exc}")
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
