"""Fork analysis package: rank a repository's forks and categorize their commits."""

from .runner import analyze_repository, main

__all__ = ["analyze_repository", "main"]
