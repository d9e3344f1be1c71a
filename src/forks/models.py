"""Records decoded from the GitHub API plus the per-fork and per-run aggregates."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _obj(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _int(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class Fork:
    name: str
    full_name: str
    owner: str
    description: str
    stars: int
    forks: int
    last_updated: str
    default_branch: str
    url: str
    clone_url: str

    @classmethod
    def from_api(cls, record: Dict[str, Any]) -> "Fork":
        """Decode one entry of `GET /repos/{owner}/{repo}/forks`."""
        owner = _obj(record.get("owner"))
        return cls(
            name=_str(record.get("name")),
            full_name=_str(record.get("full_name")),
            owner=_str(owner.get("login")),
            description=_str(record.get("description")),
            stars=_int(record.get("stargazers_count")),
            forks=_int(record.get("forks_count")),
            last_updated=_str(record.get("updated_at")),
            default_branch=_str(record.get("default_branch")),
            url=_str(record.get("html_url")),
            clone_url=_str(record.get("clone_url")),
        )


@dataclass(frozen=True)
class Commit:
    sha: str
    message: str
    author: str
    date: str

    @classmethod
    def from_api(cls, record: Dict[str, Any]) -> "Commit":
        """Decode one entry of `GET /repos/{owner}/{repo}/commits`."""
        commit = _obj(record.get("commit"))
        author = _obj(commit.get("author"))
        return cls(
            sha=_str(record.get("sha")),
            message=_str(commit.get("message")),
            author=_str(author.get("name")),
            date=_str(author.get("date")),
        )

    @property
    def first_line(self) -> str:
        return self.message.split("\n", 1)[0]


@dataclass
class Analysis:
    """Categorized labels for one fork, in commit-fetch order."""

    features: List[str] = field(default_factory=list)
    bugfixes: List[str] = field(default_factory=list)
    ideas: List[str] = field(default_factory=list)
    commits: List[Commit] = field(default_factory=list)

    @property
    def insight_count(self) -> int:
        return len(self.features) + len(self.bugfixes) + len(self.ideas)


@dataclass(frozen=True)
class RunSummary:
    total_forks: int = 0
    analyzed: int = 0
    total_features: int = 0
    total_bugfixes: int = 0
    total_ideas: int = 0

    @property
    def total_insights(self) -> int:
        return self.total_features + self.total_bugfixes + self.total_ideas

    def add(self, analysis: Analysis) -> "RunSummary":
        """Return a copy with the category counts of `analysis` added."""
        return replace(
            self,
            total_features=self.total_features + len(analysis.features),
            total_bugfixes=self.total_bugfixes + len(analysis.bugfixes),
            total_ideas=self.total_ideas + len(analysis.ideas),
        )


__all__ = ["Fork", "Commit", "Analysis", "RunSummary"]
