"""
Ranking & Filtering Engine.

Responsibilities:
- Score every pool candidate against the anchor's skills.
- Drop candidates below the minimum score.
- Order survivors by score, highest first, and cap the result size.

Non-Responsibilities:
- No database access.
- No anchor lookup or existence checks.
- No mutation of the entities passed in.

Invariant:
Output order is fully determined by the inputs. Equal scores keep their
pool order, and non-finite scores always sort after finite ones.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .models import MatchResult
from .scoring import composite_score, experience_score, skill_overlap_score

DEFAULT_REQUIRED_YEARS = 3
DEFAULT_LIMIT = 50


@dataclass(frozen=True)
class Candidate:
    """A pool entity reduced to what scoring needs."""

    entity: Any
    skills: Tuple[str, ...]
    experience_years: int


def score_sort_key(score: float) -> Tuple[int, float]:
    """
    Total-order sort key for scores, descending.

    Finite scores come first, highest to lowest. NaN and infinities share
    a single bucket after them, so comparisons never fail and the stable
    sort keeps their pool order.
    """
    if math.isfinite(score):
        return (0, -score)
    return (1, 0.0)


def rank(
    anchor_skills: Sequence[str],
    pool: Iterable[Candidate],
    min_score: float = 0.0,
    limit: Optional[int] = DEFAULT_LIMIT,
    required_years: int = DEFAULT_REQUIRED_YEARS,
    anchor_is_requirement: bool = True,
) -> List[MatchResult]:
    """
    Rank pool candidates by compatibility with the anchor.

    Args:
        anchor_skills: Skill tags of the anchor entity
        pool: Candidates of the opposite entity type, in storage order
        min_score: Candidates scoring strictly below this are dropped
        limit: Maximum number of results (None = no cap)
        required_years: Experience baseline for the experience score
        anchor_is_requirement: True when the anchor's tags are the
            requirement set (job anchor). False when each candidate's tags
            are (worker anchor ranking jobs).

    Returns:
        MatchResult list sorted by score descending. matching_skills lists
        the candidate's own tags that the anchor also has, in the
        candidate's order.
    """
    anchor_set = set(anchor_skills)
    survivors: List[MatchResult] = []

    for candidate in pool:
        if anchor_is_requirement:
            skill = skill_overlap_score(anchor_set, candidate.skills)
        else:
            skill = skill_overlap_score(candidate.skills, anchor_set)
        experience = experience_score(candidate.experience_years, required_years)
        score = composite_score(skill, experience)

        if score < min_score:
            continue

        matching = tuple(s for s in candidate.skills if s in anchor_set)
        survivors.append(MatchResult(entity=candidate.entity, score=score, matching_skills=matching))

    # list.sort is stable: ties keep pool order
    survivors.sort(key=lambda r: score_sort_key(r.score))

    if limit is not None:
        survivors = survivors[:max(limit, 0)]
    return survivors
