"""
Match Direction Controller.

Responsibilities:
- Rank workers for a job, and jobs for a worker.
- Translate snapshots into ranking candidates for each direction.

Non-Responsibilities:
- No anchor lookup. Callers resolve the anchor first and handle
  AnchorNotFound themselves.
- No "is this job active" filtering; pools arrive pre-filtered.

Invariant:
Both directions score a pair identically: the job's requirements are the
requirement set and the worker's years are the experience measured.
"""

from typing import Iterable, Optional

from .models import JobSnapshot, MatchReport, WorkerSnapshot
from .ranking import DEFAULT_LIMIT, DEFAULT_REQUIRED_YEARS, Candidate, rank


def match_workers_for_job(
    job: JobSnapshot,
    workers: Iterable[WorkerSnapshot],
    min_score: float = 0.0,
    limit: Optional[int] = DEFAULT_LIMIT,
    required_years: int = DEFAULT_REQUIRED_YEARS,
) -> MatchReport:
    """Rank the worker pool against one job's requirements."""
    pool = (Candidate(entity=w, skills=w.skills, experience_years=w.experience_years) for w in workers)
    results = rank(
        job.requirements,
        pool,
        min_score=min_score,
        limit=limit,
        required_years=required_years,
        anchor_is_requirement=True,
    )
    return MatchReport(anchor=job, results=results)


def match_jobs_for_worker(
    worker: WorkerSnapshot,
    jobs: Iterable[JobSnapshot],
    min_score: float = 0.0,
    limit: Optional[int] = DEFAULT_LIMIT,
    required_years: int = DEFAULT_REQUIRED_YEARS,
) -> MatchReport:
    """Rank the active job pool for one worker."""
    # every job is measured against the same worker's experience
    pool = (Candidate(entity=j, skills=j.requirements, experience_years=worker.experience_years) for j in jobs)
    results = rank(
        worker.skills,
        pool,
        min_score=min_score,
        limit=limit,
        required_years=required_years,
        anchor_is_requirement=False,
    )
    return MatchReport(anchor=worker, results=results)
