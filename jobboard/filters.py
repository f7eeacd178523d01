"""Filter a job list by level, type and skill."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterable

from jobboard.log import get_logger
from jobboard.models import Job

log = get_logger(__name__)

FILTER_ATTRIBUTES: tuple[str, ...] = ("level", "type", "skill")


def distinct_values(jobs: Iterable[Job], attribute: str) -> list[str]:
    """Unique values of *attribute* across *jobs*, in first-seen order."""
    if attribute not in FILTER_ATTRIBUTES:
        raise ValueError(f"cannot filter on {attribute!r}; expected one of {FILTER_ATTRIBUTES}")
    return list(dict.fromkeys(getattr(job, attribute) for job in jobs))


@dataclass(frozen=True)
class FilterSelection:
    """Chosen filter values; ``None`` or ``""`` means "All"."""

    level: str | None = None
    type: str | None = None
    skill: str | None = None

    def constraints(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

    def is_empty(self) -> bool:
        return not self.constraints()

    def matches(self, job: Job) -> bool:
        return all(getattr(job, attr) == value for attr, value in self.constraints().items())


def apply_filters(jobs: Iterable[Job], selection: FilterSelection) -> list[Job]:
    """Jobs satisfying every constraint in *selection*; *jobs* is left untouched."""
    constraints = selection.constraints()
    result = [job for job in jobs if selection.matches(job)]
    log.debug("Filter %s kept %d job(s)", constraints or "none", len(result))
    return result
