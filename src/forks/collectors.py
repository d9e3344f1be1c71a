"""Fetchers for the fork list and per-fork commit history."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from .config import BASE_URL, COMMITS_PER_PAGE, FORKS_PER_PAGE, MAX_PAGES_COMMITS
from .http_client import DecodeFailure, fetch_all
from .models import Commit, Fork


class CommitFetchFailure(RuntimeError):
    """A fork's commit history came back empty or could not be retrieved."""

    def __init__(self, full_name: str, reason: str) -> None:
        self.full_name = full_name
        self.reason = reason
        super().__init__(f"Could not fetch commits for {full_name}: {reason}")


def _require_objects(url: str, records: List[Any]) -> List[Dict[str, Any]]:
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise DecodeFailure(url, f"entry {index} is {type(record).__name__}, expected an object")
    return records


def get_forks(owner: str, repo: str, token: Optional[str] = None) -> List[Fork]:
    """Return every fork of `owner/repo` in API order.

    A failed request (even on the first page) yields whatever was collected so
    far, possibly nothing; an undecodable body raises DecodeFailure.
    """
    url = f"{BASE_URL}/repos/{owner}/{repo}/forks"
    records = _require_objects(url, fetch_all(url, FORKS_PER_PAGE, token=token))
    return [Fork.from_api(record) for record in records]


def get_commits(owner: str,
                repo: str,
                branch: str,
                token: Optional[str] = None,
                *,
                since: Optional[str] = None,
                max_pages: int = MAX_PAGES_COMMITS) -> List[Commit]:
    """Return recent commits on `branch`, capped at max_pages * COMMITS_PER_PAGE."""
    full_name = f"{owner}/{repo}"
    url = f"{BASE_URL}/repos/{owner}/{repo}/commits"
    params = {"sha": branch or None, "since": since}
    try:
        records = fetch_all(url, COMMITS_PER_PAGE, max_pages=max_pages, token=token, params=params)
        records = _require_objects(url, records)
    except DecodeFailure as exc:
        raise CommitFetchFailure(full_name, str(exc)) from exc
    except requests.RequestException as exc:
        raise CommitFetchFailure(full_name, f"request failed: {exc}") from exc

    if not records:
        raise CommitFetchFailure(full_name, "no commits returned")
    return [Commit.from_api(record) for record in records]


__all__ = ["CommitFetchFailure", "get_forks", "get_commits"]
