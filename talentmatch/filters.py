"""
Typed listing filters.

Each filter turns its populated fields into SQLAlchemy boolean expressions.
Fields left as None add no condition.
"""

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import Integer, and_, cast, func, or_

from .database import JobPosting, Worker, WorkerSkill


def _contains(value: str) -> str:
    return f"%{value}%"


# salary_range is stored as "min-max", e.g. "50000-80000"
_SALARY_DASH = func.instr(JobPosting.salary_range, "-")
SALARY_LOWER = cast(func.trim(func.substr(JobPosting.salary_range, 1, _SALARY_DASH - 1)), Integer)
SALARY_UPPER = cast(func.trim(func.substr(JobPosting.salary_range, _SALARY_DASH + 1)), Integer)


def _has_salary_range():
    return and_(JobPosting.salary_range.isnot(None), _SALARY_DASH > 0)


@dataclass(frozen=True)
class JobFilter:
    client_id: Optional[str] = None
    is_active: Optional[bool] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    search: Optional[str] = None  # title or description
    salary_min: Optional[int] = None  # lower bound of salary_range at least this
    salary_max: Optional[int] = None  # upper bound of salary_range at most this
    limit: Optional[int] = None

    def conditions(self) -> List:
        conds = []
        if self.client_id is not None:
            conds.append(JobPosting.client_id == self.client_id)
        if self.is_active is not None:
            conds.append(JobPosting.is_active == self.is_active)
        if self.location:
            conds.append(JobPosting.location.ilike(_contains(self.location)))
        if self.job_type:
            conds.append(JobPosting.job_type == self.job_type)
        if self.search:
            pattern = _contains(self.search)
            conds.append(or_(JobPosting.title.ilike(pattern), JobPosting.description.ilike(pattern)))
        if self.salary_min is not None:
            conds.append(and_(_has_salary_range(), SALARY_LOWER >= self.salary_min))
        if self.salary_max is not None:
            conds.append(and_(_has_salary_range(), SALARY_UPPER <= self.salary_max))
        return conds

    def apply(self, query):
        """Narrow a JobPosting query, newest first."""
        query = query.filter(*self.conditions()).order_by(JobPosting.created_at.desc(), JobPosting.id)
        if self.limit is not None:
            query = query.limit(self.limit)
        return query


@dataclass(frozen=True)
class WorkerFilter:
    search: Optional[str] = None  # name or email
    skill: Optional[str] = None  # exact, case-sensitive tag
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    limit: Optional[int] = None

    def conditions(self) -> List:
        conds = []
        if self.search:
            pattern = _contains(self.search)
            conds.append(or_(Worker.name.ilike(pattern), Worker.email.ilike(pattern)))
        if self.skill:
            conds.append(Worker.skill_rows.any(WorkerSkill.skill == self.skill))
        if self.min_experience is not None:
            conds.append(Worker.experience_years >= self.min_experience)
        if self.max_experience is not None:
            conds.append(Worker.experience_years <= self.max_experience)
        return conds

    def apply(self, query):
        """Narrow a Worker query, newest first."""
        query = query.filter(*self.conditions()).order_by(Worker.created_at.desc(), Worker.id)
        if self.limit is not None:
            query = query.limit(self.limit)
        return query
