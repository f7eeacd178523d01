"""Display entries for a job sequence, independent of the UI toolkit."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from jobboard.models import Job

NO_JOBS_MESSAGE = "Error! No jobs found, try different filters."


@dataclass(frozen=True)
class Entry:
    key: str
    label: str
    job: Job | None = None

    @property
    def clickable(self) -> bool:
        return self.job is not None

    def details(self) -> str:
        if self.job is None:
            raise ValueError("placeholder entry has no job details")
        return self.job.detail_text()


def entry_label(job: Job) -> str:
    return f"{job.title} - {job.type} ({job.level}) - Posted: {job.posted}"


def render(jobs: Iterable[Job]) -> list[Entry]:
    """One entry per job, or a single placeholder when there are none."""
    entries = [
        Entry(key=f"jobListing-{i}", label=entry_label(job), job=job)
        for i, job in enumerate(jobs)
    ]
    if not entries:
        return [Entry(key="noJobs", label=NO_JOBS_MESSAGE)]
    return entries
