"""
Tests for typed listing filters.
"""

from datetime import datetime, timedelta

import pytest

from talentmatch.database import JobPosting, Worker
from talentmatch.filters import JobFilter, WorkerFilter


def _job_ids(session, job_filter):
    return [j.id for j in job_filter.apply(session.query(JobPosting))]


def _worker_ids(session, worker_filter):
    return [w.id for w in worker_filter.apply(session.query(Worker))]


class TestJobFilter:
    """Job listing predicates."""

    def test_empty_filter_has_no_conditions(self):
        assert JobFilter().conditions() == []

    def test_each_field_adds_a_condition(self):
        job_filter = JobFilter(client_id="c", is_active=True, location="x", job_type="remote", search="y")
        assert len(job_filter.conditions()) == 5

    def test_active_only(self, populated_session):
        assert _job_ids(populated_session, JobFilter(is_active=True)) == ["job-2", "job-1"]

    def test_inactive_only(self, populated_session):
        assert _job_ids(populated_session, JobFilter(is_active=False)) == ["job-3"]

    def test_location_case_insensitive_substring(self, populated_session):
        assert _job_ids(populated_session, JobFilter(location="berl")) == ["job-1"]

    def test_search_title_or_description(self, populated_session):
        assert _job_ids(populated_session, JobFilter(search="platform")) == ["job-2"]
        assert _job_ids(populated_session, JobFilter(search="engineer role")) == ["job-2", "job-1"]

    def test_client_id(self, populated_session):
        assert len(_job_ids(populated_session, JobFilter(client_id="client-1"))) == 3
        assert _job_ids(populated_session, JobFilter(client_id="client-2")) == []

    def test_combined_filters(self, populated_session):
        job_filter = JobFilter(is_active=True, search="engineer", job_type="full-time")
        assert _job_ids(populated_session, job_filter) == ["job-1"]

    def test_limit(self, populated_session):
        assert _job_ids(populated_session, JobFilter(limit=1)) == ["job-3"]


class TestWorkerFilter:
    """Worker listing predicates."""

    def test_empty_filter_lists_everyone(self, populated_session):
        assert _worker_ids(populated_session, WorkerFilter()) == ["worker-3", "worker-2", "worker-1"]

    def test_skill_is_exact(self, populated_session):
        assert _worker_ids(populated_session, WorkerFilter(skill="Docker")) == ["worker-2"]
        assert _worker_ids(populated_session, WorkerFilter(skill="docker")) == []

    def test_search_name_or_email(self, populated_session):
        assert _worker_ids(populated_session, WorkerFilter(search="ADA")) == ["worker-1"]
        assert _worker_ids(populated_session, WorkerFilter(search="bo@")) == ["worker-2"]

    def test_experience_range(self, populated_session):
        assert _worker_ids(populated_session, WorkerFilter(min_experience=1)) == ["worker-2", "worker-1"]
        assert _worker_ids(populated_session, WorkerFilter(max_experience=1)) == ["worker-3", "worker-2"]
        assert _worker_ids(populated_session, WorkerFilter(min_experience=2, max_experience=4)) == []

    def test_zero_bounds_are_applied(self, populated_session):
        """0 is a real bound, not 'unset'."""
        assert _worker_ids(populated_session, WorkerFilter(max_experience=0)) == ["worker-3"]


class TestSalaryFilter:
    """Salary bounds parsed from "min-max" salary ranges."""

    @pytest.fixture
    def salaried_session(self, db_session):
        now = datetime.now()
        ranges = [
            ("low", "40000-60000"),
            ("high", "70000 - 90000"),
            ("unset", None),
            ("text", "negotiable"),
        ]
        for i, (jid, salary_range) in enumerate(ranges):
            created = now - timedelta(days=i)
            db_session.add(JobPosting(
                id=jid,
                client_id="client-1",
                title=jid,
                location="Remote",
                salary_range=salary_range,
                created_at=created,
                updated_at=created,
            ))
        db_session.commit()
        return db_session

    def test_salary_fields_add_conditions(self):
        assert len(JobFilter(salary_min=1, salary_max=2).conditions()) == 2

    def test_salary_min_uses_lower_bound(self, salaried_session):
        assert _job_ids(salaried_session, JobFilter(salary_min=50000)) == ["high"]
        assert _job_ids(salaried_session, JobFilter(salary_min=40000)) == ["low", "high"]

    def test_salary_max_uses_upper_bound(self, salaried_session):
        assert _job_ids(salaried_session, JobFilter(salary_max=60000)) == ["low"]
        assert _job_ids(salaried_session, JobFilter(salary_max=59999)) == []

    def test_salary_window(self, salaried_session):
        job_filter = JobFilter(salary_min=30000, salary_max=95000)
        assert _job_ids(salaried_session, job_filter) == ["low", "high"]

    def test_jobs_without_range_never_match_salary_bounds(self, salaried_session):
        ids = _job_ids(salaried_session, JobFilter(salary_min=0))
        assert "unset" not in ids
        assert "text" not in ids

    def test_unfiltered_listing_keeps_jobs_without_range(self, salaried_session):
        assert len(_job_ids(salaried_session, JobFilter())) == 4
