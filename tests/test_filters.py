"""Tests for distinct filter values and applying a filter selection."""
import itertools

import pytest

from jobboard.filters import FILTER_ATTRIBUTES, FilterSelection, apply_filters, distinct_values


class TestDistinctValues:

    def test_first_seen_order(self, jobs):
        assert distinct_values(jobs, "level") == ["Senior", "Junior"]
        assert distinct_values(jobs, "type") == ["Full-Time", "Part-Time", "Contract"]
        assert distinct_values(jobs, "skill") == ["Python", "SQL", "JavaScript"]

    @pytest.mark.parametrize("attribute", FILTER_ATTRIBUTES)
    def test_no_duplicates_and_equals_observed_set(self, jobs, attribute):
        values = distinct_values(jobs, attribute)
        assert len(values) == len(set(values))
        assert set(values) == {getattr(j, attribute) for j in jobs}

    def test_empty_list(self):
        assert distinct_values([], "skill") == []

    def test_unknown_attribute(self, jobs):
        with pytest.raises(ValueError):
            distinct_values(jobs, "title")


class TestFilterSelection:

    def test_empty_selection(self):
        assert FilterSelection().is_empty()
        assert FilterSelection(level="", type=None, skill="").is_empty()

    def test_constraints_skip_all(self):
        assert FilterSelection(level="Senior", skill="").constraints() == {"level": "Senior"}


class TestApplyFilters:

    def test_no_constraints_returns_everything_in_order(self, jobs):
        assert apply_filters(jobs, FilterSelection()) == jobs

    def test_single_constraint(self, jobs):
        result = apply_filters(jobs, FilterSelection(level="Junior"))
        assert [j.title for j in result] == ["Data Analyst", "QA Tester"]

    def test_combined_constraints(self, jobs):
        result = apply_filters(jobs, FilterSelection(level="Junior", skill="Python"))
        assert [j.title for j in result] == ["QA Tester"]

    def test_no_match_is_empty(self, jobs):
        assert apply_filters(jobs, FilterSelection(level="Senior", type="Part-Time")) == []

    def test_source_list_untouched(self, jobs):
        before = list(jobs)
        result = apply_filters(jobs, FilterSelection(skill="SQL"))
        assert jobs == before
        assert result is not jobs

    def test_every_selection_partitions_the_list(self, jobs):
        """Returned jobs match every constraint; every other job breaks one."""
        choices = {attr: [None] + distinct_values(jobs, attr) + ["Nope"] for attr in FILTER_ATTRIBUTES}
        for level, type_, skill in itertools.product(*(choices[a] for a in FILTER_ATTRIBUTES)):
            selection = FilterSelection(level=level, type=type_, skill=skill)
            result = apply_filters(jobs, selection)
            constraints = selection.constraints()
            for job in result:
                assert job in jobs
                assert all(getattr(job, a) == v for a, v in constraints.items())
            for job in jobs:
                if job not in result:
                    assert any(getattr(job, a) != v for a, v in constraints.items())
