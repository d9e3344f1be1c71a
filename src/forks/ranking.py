"""Order forks by popularity and pick the ones worth analyzing."""

from __future__ import annotations

from typing import List, Sequence

from .config import MAX_FORKS
from .models import Fork


def rank_forks(forks: Sequence[Fork], limit: int = MAX_FORKS) -> List[Fork]:
    """Top `min(limit, len(forks))` forks by stars, descending.

    `sorted` is stable, so forks with equal star counts keep the order the API
    returned them in.
    """
    ranked = sorted(forks, key=lambda fork: -fork.stars)
    return ranked[: max(0, min(limit, len(ranked)))]


__all__ = ["rank_forks"]
