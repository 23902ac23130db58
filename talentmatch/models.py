"""
Read-only snapshots passed into the matching engine, and the records it returns.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_JOB_TYPE = "full-time"


@dataclass(frozen=True)
class WorkerSnapshot:
    """A worker as loaded from storage."""

    id: str
    name: str
    skills: Tuple[str, ...] = ()
    experience_years: int = 0
    email: str = ""
    phone: Optional[str] = None
    resume_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["skills"] = list(self.skills)
        return data


@dataclass(frozen=True)
class JobSnapshot:
    """A job posting as loaded from storage."""

    id: str
    title: str
    requirements: Tuple[str, ...] = ()
    client_id: str = ""
    description: str = ""
    location: str = ""
    salary_range: Optional[str] = None  # "min-max"
    job_type: str = DEFAULT_JOB_TYPE
    is_active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["requirements"] = list(self.requirements)
        return data


@dataclass(frozen=True)
class MatchResult:
    """One ranked pool entity with its compatibility score."""

    entity: Any
    score: float
    matching_skills: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entity": self.entity.to_dict(),
            "score": round(self.score, 2),
            "matching_skills": list(self.matching_skills),
        }


@dataclass(frozen=True)
class MatchReport:
    """Ranked matches for a single anchor job or worker."""

    anchor: Any
    results: List[MatchResult] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "anchor": self.anchor.to_dict(),
            "match_count": self.match_count,
            "matches": [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True)
class CorpusStats:
    total_active_jobs: int = 0
    total_workers: int = 0
    average_requirements_per_job: float = 0.0
    average_skills_per_worker: float = 0.0
    potential_matches: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
