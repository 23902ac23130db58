"""
Storage access for the matching engine.

Loads anchors and pools as immutable snapshots and inserts new records.
Callers own the session and commit boundaries for reads; inserts commit.
"""

from typing import Any, Dict, List, Optional

from .database import JobPosting, Worker, WorkerSkill
from .errors import AnchorNotFound
from .filters import JobFilter, WorkerFilter
from .models import DEFAULT_JOB_TYPE, JobSnapshot, WorkerSnapshot


def add_worker(session, data: Dict[str, Any]) -> WorkerSnapshot:
    """Insert a worker from an already-validated record."""
    worker = Worker(
        name=data["name"],
        email=data["email"],
        phone=data.get("phone"),
        experience_years=data.get("experience_years", 0),
        resume_url=data.get("resume_url"),
    )
    if data.get("id"):
        worker.id = data["id"]
    worker.skills = list(data.get("skills", []))
    session.add(worker)
    session.commit()
    return worker.to_snapshot()


def add_job(session, data: Dict[str, Any]) -> JobSnapshot:
    """Insert a job posting from an already-validated record."""
    job = JobPosting(
        client_id=data["client_id"],
        title=data["title"],
        description=data.get("description", ""),
        salary_range=data.get("salary_range"),
        location=data["location"],
        job_type=data.get("job_type") or DEFAULT_JOB_TYPE,
        is_active=data.get("is_active", True),
    )
    if data.get("id"):
        job.id = data["id"]
    job.requirements = list(data.get("requirements", []))
    session.add(job)
    session.commit()
    return job.to_snapshot()


def get_worker(session, worker_id: str) -> WorkerSnapshot:
    """Resolve a worker by id, raising AnchorNotFound if absent."""
    worker = session.query(Worker).filter_by(id=worker_id).first()
    if worker is None:
        raise AnchorNotFound("worker", worker_id)
    return worker.to_snapshot()


def get_active_job(session, job_id: str) -> JobSnapshot:
    """Resolve an active job by id. Inactive jobs count as not found."""
    job = session.query(JobPosting).filter_by(id=job_id, is_active=True).first()
    if job is None:
        raise AnchorNotFound("job", job_id)
    return job.to_snapshot()


def load_worker_pool(session) -> List[WorkerSnapshot]:
    """All workers, newest first."""
    return [w.to_snapshot() for w in WorkerFilter().apply(session.query(Worker))]


def load_active_job_pool(session) -> List[JobSnapshot]:
    """All active jobs, newest first."""
    return [j.to_snapshot() for j in JobFilter(is_active=True).apply(session.query(JobPosting))]


def list_jobs(session, job_filter: Optional[JobFilter] = None) -> List[JobSnapshot]:
    job_filter = job_filter or JobFilter()
    return [j.to_snapshot() for j in job_filter.apply(session.query(JobPosting))]


def list_workers(session, worker_filter: Optional[WorkerFilter] = None) -> List[WorkerSnapshot]:
    worker_filter = worker_filter or WorkerFilter()
    return [w.to_snapshot() for w in worker_filter.apply(session.query(Worker))]


def list_distinct_skills(session) -> List[str]:
    """Every skill tag held by at least one worker, sorted."""
    rows = session.query(WorkerSkill.skill).distinct().order_by(WorkerSkill.skill).all()
    return [skill for (skill,) in rows]
