"""In-place orderings of a job list."""
from __future__ import annotations

import unicodedata
from enum import Enum

from jobboard.log import get_logger
from jobboard.models import Job

log = get_logger(__name__)


class SortMode(str, Enum):
    AZ = "az"
    ZA = "za"
    LATEST = "latest"
    OLDEST = "oldest"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[SortMode, str] = {
    SortMode.AZ: "Alphabetical (A–Z)",
    SortMode.ZA: "Alphabetical (Z–A)",
    SortMode.LATEST: "Latest",
    SortMode.OLDEST: "Oldest",
}


def title_key(title: str) -> tuple[str, str]:
    """Collation key: accents and case ignored first, then lowercase before uppercase."""
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), title.swapcase()


def sort_jobs(jobs: list[Job], mode: SortMode | str) -> None:
    """Stable in-place sort of *jobs*; equal keys keep their relative order."""
    mode = SortMode(mode)
    if mode is SortMode.AZ:
        jobs.sort(key=lambda j: title_key(j.title))
    elif mode is SortMode.ZA:
        jobs.sort(key=lambda j: title_key(j.title), reverse=True)
    elif mode is SortMode.LATEST:
        jobs.sort(key=Job.recency_minutes)
    else:
        jobs.sort(key=Job.recency_minutes, reverse=True)
    log.debug("Sorted %d job(s) by %s", len(jobs), mode.value)
