"""
Compatibility Scoring (v1).

Responsibilities:
- Score how much of a requirement set a candidate's skills cover.
- Score a candidate's experience against a required number of years.
- Combine both signals into a single weighted compatibility score.

Non-Responsibilities:
- No ranking, thresholds, or limits.
- No database access.

Invariant:
Every function here is pure and returns a finite value in [0, 100]
for inputs in its stated domain.
"""

from typing import Iterable

SKILL_WEIGHT = 0.7
EXPERIENCE_WEIGHT = 0.3

MAX_SCORE = 100.0


def skill_overlap_score(required: Iterable[str], candidate: Iterable[str]) -> float:
    """
    Percentage of the required skills the candidate covers.

    Tags are compared exactly (case-sensitive). Duplicates on either side
    count once. An empty requirement set scores 0.0: nothing stated means
    nothing can be matched.
    """
    required_set = set(required)
    if not required_set:
        return 0.0
    matched = required_set & set(candidate)
    return (len(matched) / len(required_set)) * MAX_SCORE


def experience_score(actual_years: int, required_years: int) -> float:
    """
    Experience signal, saturating at 100 once the requirement is met.

    Args:
        actual_years: Candidate's years of experience
        required_years: Baseline the candidate is measured against

    Returns:
        100.0 when actual_years >= required_years, otherwise the fraction of
        the (minimum 1) requirement covered, as a percentage.
    """
    actual_years = max(actual_years, 0)
    if actual_years >= required_years:
        return MAX_SCORE
    return (actual_years / max(required_years, 1)) * MAX_SCORE


def composite_score(skill: float, experience: float) -> float:
    """Weighted compatibility score (skills 70%, experience 30%)."""
    return skill * SKILL_WEIGHT + experience * EXPERIENCE_WEIGHT
