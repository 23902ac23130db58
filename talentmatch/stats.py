"""Corpus-level statistics over jobs and workers. Pure aggregation."""

from typing import Iterable, List

from .models import CorpusStats, JobSnapshot, WorkerSnapshot


def _average_nonempty(sizes: List[int]) -> float:
    nonempty = [s for s in sizes if s > 0]
    if not nonempty:
        return 0.0
    return sum(nonempty) / len(nonempty)


def compute_corpus_stats(jobs: Iterable[JobSnapshot], workers: Iterable[WorkerSnapshot]) -> CorpusStats:
    """
    Aggregate counts and averages over the active job pool and worker pool.

    Jobs without requirements and workers without skills are left out of
    the respective average. Empty pools give all-zero statistics.
    """
    job_sizes = [len(j.requirements) for j in jobs]
    worker_sizes = [len(w.skills) for w in workers]

    total_jobs = len(job_sizes)
    total_workers = len(worker_sizes)

    return CorpusStats(
        total_active_jobs=total_jobs,
        total_workers=total_workers,
        average_requirements_per_job=_average_nonempty(job_sizes),
        average_skills_per_worker=_average_nonempty(worker_sizes),
        potential_matches=total_jobs * total_workers,
    )
