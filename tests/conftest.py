"""
Pytest configuration and shared fixtures.
"""

import pytest
from datetime import datetime, timedelta
from typing import Dict, Any

from talentmatch.database import JobPosting, Worker, init_database, get_session
from talentmatch.logger import StructuredLogger, reset_logger
from talentmatch.models import JobSnapshot, WorkerSnapshot


@pytest.fixture(autouse=True)
def _fresh_global_logger():
    """Keep the process-wide logger from leaking between tests."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def quiet_logger():
    """Logger with no handlers attached."""
    logger = StructuredLogger(name="talentmatch-test", enable_console=False, enable_file=False)
    yield logger
    logger.close()


@pytest.fixture
def go_job() -> JobSnapshot:
    """Job requiring Go, SQL and Docker."""
    return JobSnapshot(id="job-go", title="backend engineer", requirements=("Go", "SQL", "Docker"))


@pytest.fixture
def worker_a() -> WorkerSnapshot:
    """Two of three skills, plenty of experience."""
    return WorkerSnapshot(id="worker-a", name="Ada", skills=("Go", "SQL"), experience_years=4)


@pytest.fixture
def worker_b() -> WorkerSnapshot:
    """All three skills, junior."""
    return WorkerSnapshot(id="worker-b", name="Bo", skills=("Go", "SQL", "Docker"), experience_years=1)


@pytest.fixture
def valid_worker_record() -> Dict[str, Any]:
    """Valid worker record."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 1234 5678",
        "skills": ["Python", "SQL", "Docker"],
        "experience_years": 5,
    }


@pytest.fixture
def valid_job_record() -> Dict[str, Any]:
    """Valid job posting record."""
    return {
        "client_id": "client-1",
        "title": "Data Engineer",
        "description": "Build pipelines in Python",
        "requirements": ["Python", "SQL"],
        "location": "Berlin, Germany",
        "job_type": "full-time",
    }


@pytest.fixture
def db_path(tmp_path):
    """Initialized temporary database path."""
    path = tmp_path / "talentmatch.db"
    init_database(path)
    return path


@pytest.fixture
def db_session(db_path):
    """Session on a temporary database."""
    session = get_session(db_path)
    yield session
    session.close()


@pytest.fixture
def populated_session(db_session):
    """
    Database with three workers and three jobs (one inactive).

    created_at is spread out so newest-first ordering is deterministic:
    worker-3 / job-3 are the newest.
    """
    now = datetime.now()
    workers = [
        ("worker-1", "Ada", "ada@example.com", ["Python", "SQL"], 5, now - timedelta(days=3)),
        ("worker-2", "Bo", "bo@example.com", ["Go", "Docker", "SQL"], 1, now - timedelta(days=2)),
        ("worker-3", "Cy", "cy@example.com", [], 0, now - timedelta(days=1)),
    ]
    for wid, name, email, skills, years, created in workers:
        worker = Worker(id=wid, name=name, email=email, experience_years=years, created_at=created, updated_at=created)
        worker.skills = skills
        db_session.add(worker)

    jobs = [
        ("job-1", "Data Engineer", ["Python", "SQL"], "Berlin", "full-time", True, now - timedelta(days=3)),
        ("job-2", "Platform Engineer", ["Go", "Docker", "Kubernetes"], "Remote", "contract", True, now - timedelta(days=2)),
        ("job-3", "Old Posting", ["Python"], "Paris", "part-time", False, now - timedelta(days=1)),
    ]
    for jid, title, reqs, location, job_type, active, created in jobs:
        job = JobPosting(
            id=jid,
            client_id="client-1",
            title=title,
            description=f"{title} role",
            location=location,
            job_type=job_type,
            is_active=active,
            created_at=created,
            updated_at=created,
        )
        job.requirements = reqs
        db_session.add(job)

    db_session.commit()
    return db_session
