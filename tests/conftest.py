"""Shared fixtures for the job board tests."""
import json
from typing import Callable, List

import pytest

from jobboard.models import Job


def make_job(
    title: str = "Engineer",
    posted: str = "5 minutes ago",
    type: str = "Full-Time",
    level: str = "Senior",
    skill: str = "Python",
    detail: str = "Build things.",
) -> Job:
    return Job(title=title, posted=posted, type=type, level=level, skill=skill, detail=detail)


@pytest.fixture
def job_factory() -> Callable[..., Job]:
    return make_job


@pytest.fixture
def records() -> List[dict]:
    """Four well-formed upload records."""
    return [
        {"Title": "Backend Engineer", "Posted": "5 minutes ago", "Type": "Full-Time",
         "Level": "Senior", "Skill": "Python", "Detail": "Services."},
        {"Title": "Data Analyst", "Posted": "3 hours ago", "Type": "Part-Time",
         "Level": "Junior", "Skill": "SQL", "Detail": "Dashboards."},
        {"Title": "Frontend Developer", "Posted": "45 minutes ago", "Type": "Contract",
         "Level": "Senior", "Skill": "JavaScript", "Detail": "Portal."},
        {"Title": "QA Tester", "Posted": "Recently", "Type": "Full-Time",
         "Level": "Junior", "Skill": "Python", "Detail": "Testing."},
    ]


@pytest.fixture
def upload(records: List[dict]) -> bytes:
    return json.dumps(records).encode("utf-8")


@pytest.fixture
def jobs(records: List[dict]) -> List[Job]:
    return [
        make_job(r["Title"], r["Posted"], r["Type"], r["Level"], r["Skill"], r["Detail"])
        for r in records
    ]
