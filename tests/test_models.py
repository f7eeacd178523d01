"""Tests for the Job record and its derived values."""
import dataclasses
import math

import pytest

from jobboard.models import UNKNOWN_RECENCY, Job


class TestDetailText:

    def test_fixed_order_labels(self):
        job = Job("Dev", "1 hour ago", "Contract", "Junior", "Go", "Write Go.")
        assert job.detail_text() == (
            "Title: Dev\n"
            "Type: Contract\n"
            "Level: Junior\n"
            "Skill: Go\n"
            "Description: Write Go.\n"
            "Posted: 1 hour ago"
        )

    def test_job_is_immutable(self, job_factory):
        job = job_factory()
        with pytest.raises(dataclasses.FrozenInstanceError):
            job.title = "Other"  # type: ignore[misc]


class TestRecencyMinutes:

    @pytest.mark.parametrize(
        "posted, expected",
        [
            ("5 minutes ago", 5),
            ("1 minute ago", 1),
            ("2 hours ago", 120),
            ("1 hour ago", 60),
            ("3 days ago", 3 * 1440),
            ("  10 minutes ago", 10),
        ],
    )
    def test_known_units(self, posted, expected, job_factory):
        assert job_factory(posted=posted).recency_minutes() == expected

    def test_no_unit_is_sentinel(self, job_factory):
        assert job_factory(posted="ago").recency_minutes() == UNKNOWN_RECENCY
        assert math.isinf(UNKNOWN_RECENCY)

    def test_missing_field_text_is_sentinel(self, job_factory):
        """Records uploaded without Posted carry "undefined", which has no unit."""
        assert job_factory(posted="undefined").recency_minutes() == UNKNOWN_RECENCY

    @pytest.mark.parametrize("posted", ["\u0663 hours ago", "\uff15 minutes ago", "\u0968 days ago"])
    def test_non_ascii_digits_do_not_parse(self, job_factory, posted):
        assert job_factory(posted=posted).recency_minutes() == 0

    def test_unit_without_number_is_zero(self, job_factory):
        assert job_factory(posted="a few minutes ago").recency_minutes() == 0
        assert job_factory(posted="an hour ago").recency_minutes() == 0

    def test_first_matching_unit_wins(self, job_factory):
        assert job_factory(posted="1 hour 30 minutes ago").recency_minutes() == 1

    def test_sentinel_larger_than_any_value(self, job_factory):
        assert job_factory(posted="9999 days ago").recency_minutes() < UNKNOWN_RECENCY
