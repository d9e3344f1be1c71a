"""Parse user-supplied repository references into owner/name pairs."""

from __future__ import annotations

import re
from dataclasses import dataclass

ACCEPTED_FORMS = (
    "https://github.com/owner/repo",
    "github.com/owner/repo",
    "owner/repo",
)

REFERENCE_PATTERNS = (
    re.compile(r"^https?://(?:www\.)?github\.com/([^/\s]+)/([^/\s]+?)(?:\.git)?/?$", re.IGNORECASE),
    re.compile(r"^(?:www\.)?github\.com/([^/\s]+)/([^/\s]+?)(?:\.git)?/?$", re.IGNORECASE),
    re.compile(r"^([^/\s]+)/([^/\s]+?)(?:\.git)?$"),
)


class InvalidReferenceFormat(ValueError):
    """Raised when a repository reference matches none of the accepted forms."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(
            "Invalid GitHub URL format. Expected formats: " + ", ".join(ACCEPTED_FORMS)
        )


@dataclass(frozen=True)
class RepositoryRef:
    """A parsed `owner/name` pair identifying one GitHub repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


def parse_repo_reference(reference: str) -> RepositoryRef:
    """Return the (owner, name) pair for the first accepted form that matches."""
    cleaned = (reference or "").strip()
    for pattern in REFERENCE_PATTERNS:
        match = pattern.match(cleaned)
        if not match:
            continue
        owner, name = match.group(1), match.group(2)
        if name.endswith(".git"):
            name = name[: -len(".git")]
        if owner and name:
            return RepositoryRef(owner=owner, name=name)

    print(f"[debug] rejected repository reference: {cleaned!r}")
    raise InvalidReferenceFormat(cleaned)


__all__ = ["ACCEPTED_FORMS", "InvalidReferenceFormat", "RepositoryRef", "parse_repo_reference"]
