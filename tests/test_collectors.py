"""Tests for src.forks.collectors covering the fork and commit fetchers.

Run with coverage to exercise the data collection logic:
    pytest tests/test_collectors.py --maxfail=1 -v --cov=src.forks.collectors --cov-report=term-missing
"""

from unittest.mock import patch

import pytest
import requests

from src.forks import collectors
from src.forks.collectors import CommitFetchFailure
from src.forks.http_client import DecodeFailure


def _commit_record(sha, message="fix: x"):
    return {"sha": sha, "commit": {"message": message, "author": {"name": "A", "date": "d"}}}


@patch("src.forks.collectors.fetch_all")
def test_get_forks_decodes_records(mock_fetch):
    mock_fetch.return_value = [
        {"name": "r", "full_name": "a/r", "owner": {"login": "a"}, "stargazers_count": 2},
    ]
    forks = collectors.get_forks("o", "r", "tok")
    assert forks[0].full_name == "a/r"
    args, kwargs = mock_fetch.call_args
    assert args == ("https://api.github.com/repos/o/r/forks", 100)
    assert kwargs["token"] == "tok"


@patch("src.forks.collectors.fetch_all", return_value=[])
def test_get_forks_empty(mock_fetch):
    assert collectors.get_forks("o", "r") == []


@patch("src.forks.collectors.fetch_all")
def test_get_commits_uses_branch_and_page_cap(mock_fetch):
    mock_fetch.return_value = [_commit_record("1"), _commit_record("2")]
    commits = collectors.get_commits("a", "r", "devel", since="2024-01-01T00:00:00Z")
    assert [c.sha for c in commits] == ["1", "2"]
    args, kwargs = mock_fetch.call_args
    assert args == ("https://api.github.com/repos/a/r/commits", 30)
    assert kwargs["max_pages"] == 3
    assert kwargs["params"] == {"sha": "devel", "since": "2024-01-01T00:00:00Z"}


@patch("src.forks.collectors.fetch_all", return_value=[])
def test_get_commits_empty_raises(mock_fetch):
    with pytest.raises(CommitFetchFailure) as excinfo:
        collectors.get_commits("a", "r", "main")
    assert excinfo.value.full_name == "a/r"


@patch("src.forks.collectors.fetch_all", side_effect=DecodeFailure("url", "bad json"))
def test_get_commits_decode_failure_is_wrapped(mock_fetch):
    with pytest.raises(CommitFetchFailure) as excinfo:
        collectors.get_commits("a", "r", "main")
    assert isinstance(excinfo.value.__cause__, DecodeFailure)


@patch("src.forks.collectors.fetch_all", side_effect=DecodeFailure("url", "bad json"))
def test_get_forks_decode_failure_propagates(mock_fetch):
    with pytest.raises(DecodeFailure):
        collectors.get_forks("o", "r")


@patch("src.forks.collectors.fetch_all", side_effect=requests.ConnectionError("down"))
def test_get_commits_request_failure_is_wrapped(mock_fetch):
    with pytest.raises(CommitFetchFailure) as excinfo:
        collectors.get_commits("a", "r", "main")
    assert "request failed" in excinfo.value.reason
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


@patch("src.forks.collectors.fetch_all", return_value=[{"name": "r"}, "oops"])
def test_get_forks_rejects_non_object_entries(mock_fetch):
    with pytest.raises(DecodeFailure):
        collectors.get_forks("o", "r")


@patch("src.forks.collectors.fetch_all", return_value=[_commit_record("1"), 7])
def test_get_commits_non_object_entry_skips_fork(mock_fetch):
    with pytest.raises(CommitFetchFailure):
        collectors.get_commits("a", "r", "main")
