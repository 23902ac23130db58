"""
Match Service.

Responsibilities:
- Resolve the anchor job or worker by id.
- Load the opposite pool and normalise request parameters.
- Run the match controller and record metrics.

Non-Responsibilities:
- No scoring or ranking logic.
- No output formatting.
"""

from typing import Optional

from . import storage
from .config import Settings
from .errors import AnchorNotFound
from .logger import StructuredLogger, get_logger
from .matching import match_jobs_for_worker, match_workers_for_job
from .models import CorpusStats, MatchReport
from .schema import normalize_match_query
from .stats import compute_corpus_stats


class MatchService:
    """Read-only matching queries over one database session."""

    def __init__(self, session, settings: Optional[Settings] = None, logger: Optional[StructuredLogger] = None):
        self.session = session
        self.settings = settings or Settings()
        self.logger = logger or get_logger()

    def _query(self, min_score, limit):
        return normalize_match_query(
            min_score,
            limit,
            default_limit=self.settings.default_limit,
            max_limit=self.settings.max_limit,
        )

    def find_workers_for_job(
        self, job_id: str, min_score: Optional[float] = None, limit: Optional[int] = None
    ) -> MatchReport:
        min_score, limit = self._query(min_score, limit)
        try:
            job = storage.get_active_job(self.session, job_id)
        except AnchorNotFound:
            self.logger.record_anchor_not_found()
            self.logger.warning("Job not found or inactive", job_id=job_id)
            raise

        workers = storage.load_worker_pool(self.session)
        report = match_workers_for_job(
            job,
            workers,
            min_score=min_score,
            limit=limit,
            required_years=self.settings.required_years,
        )
        self.logger.record_match_run("job_to_workers", len(workers), report.match_count)
        self.logger.info(
            "Matched workers for job",
            job_id=job_id,
            pool_size=len(workers),
            match_count=report.match_count,
            min_score=min_score,
            limit=limit,
        )
        return report

    def find_jobs_for_worker(
        self, worker_id: str, min_score: Optional[float] = None, limit: Optional[int] = None
    ) -> MatchReport:
        min_score, limit = self._query(min_score, limit)
        try:
            worker = storage.get_worker(self.session, worker_id)
        except AnchorNotFound:
            self.logger.record_anchor_not_found()
            self.logger.warning("Worker not found", worker_id=worker_id)
            raise

        jobs = storage.load_active_job_pool(self.session)
        report = match_jobs_for_worker(
            worker,
            jobs,
            min_score=min_score,
            limit=limit,
            required_years=self.settings.required_years,
        )
        self.logger.record_match_run("worker_to_jobs", len(jobs), report.match_count)
        self.logger.info(
            "Matched jobs for worker",
            worker_id=worker_id,
            pool_size=len(jobs),
            match_count=report.match_count,
            min_score=min_score,
            limit=limit,
        )
        return report

    def corpus_stats(self) -> CorpusStats:
        jobs = storage.load_active_job_pool(self.session)
        workers = storage.load_worker_pool(self.session)
        stats = compute_corpus_stats(jobs, workers)
        self.logger.debug("Computed corpus statistics", **stats.to_dict())
        return stats
