"""Central configuration for the fork analysis workflow."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional

USER_AGENT = "fork-insights/1.0"
BASE_URL = "https://api.github.com"
FORKS_PER_PAGE = 100
COMMITS_PER_PAGE = 30
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
BACKOFF_BASE_SEC = 2
REPORT_LIST_LIMIT = 10
MAX_FORKS = 10
MAX_PAGES_COMMITS = 3  # 0 = no cap
FORK_DELAY_SEC = 1.0

HELP_TEXT = """\
Analyze features, bugfixes, and ideas in the forks of a GitHub repository.

arguments:
  repository    GitHub repository in one of these formats:
                  https://github.com/owner/repo
                  https://github.com/owner/repo.git
                  github.com/owner/repo
                  owner/repo
  token         Optional GitHub personal access token for higher API rate limits
                (without token: 60 requests/hour, with token: 5000 requests/hour).

examples:
  fork-insights https://github.com/nim-lang/Nim
  fork-insights nim-lang/Nim
  fork-insights https://github.com/nim-lang/Nim ghp_your_token_here

Commits are sorted into FEATURES, BUGFIXES and IDEAS & IMPROVEMENTS from
their messages. Up to {max_forks} forks (by stars) are analyzed, reading up to
{max_commits} recent commits each, with a short pause between forks.
"""


@dataclass(frozen=True)
class AnalysisSettings:
    """Resolved runtime settings for one analysis run."""

    repository: str
    token: Optional[str]
    max_forks: int
    max_commit_pages: int
    fork_delay_sec: float
    since: Optional[str]


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the fork analysis entry point."""

    parser = argparse.ArgumentParser(
        prog="fork-insights",
        description=HELP_TEXT.format(
            max_forks=MAX_FORKS, max_commits=MAX_PAGES_COMMITS * COMMITS_PER_PAGE
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("repository")
    parser.add_argument("token", nargs="?", default=None)
    parser.add_argument("--max-forks", type=int, default=MAX_FORKS)
    parser.add_argument("--max-commit-pages", type=int, default=MAX_PAGES_COMMITS)
    parser.add_argument("--delay", type=float, default=FORK_DELAY_SEC)
    parser.add_argument("--since", default=None, help="only commits after this ISO-8601 timestamp")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> AnalysisSettings:
    """Return immutable settings resolved from the parsed command line."""

    return AnalysisSettings(
        repository=args.repository,
        token=args.token or None,
        max_forks=max(0, int(args.max_forks)),
        max_commit_pages=max(0, int(args.max_commit_pages)),
        fork_delay_sec=max(0.0, float(args.delay)),
        since=args.since or None,
    )


__all__ = [
    "USER_AGENT",
    "BASE_URL",
    "FORKS_PER_PAGE",
    "COMMITS_PER_PAGE",
    "REQUEST_TIMEOUT",
    "MAX_RETRIES",
    "BACKOFF_BASE_SEC",
    "REPORT_LIST_LIMIT",
    "MAX_FORKS",
    "MAX_PAGES_COMMITS",
    "FORK_DELAY_SEC",
    "HELP_TEXT",
    "AnalysisSettings",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
]
