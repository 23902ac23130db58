import math
from typing import Any, Dict, List, Optional, Tuple

from .errors import InvalidQuery

JOB_TYPES = ["full-time", "part-time", "contract", "remote"]

WORKER_REQUIRED_STR_FIELDS = ["name", "email"]
WORKER_OPTIONAL_STR_FIELDS = ["id", "phone", "resume_url"]

JOB_REQUIRED_STR_FIELDS = ["client_id", "title", "location"]
JOB_OPTIONAL_STR_FIELDS = ["id", "description", "salary_range", "job_type"]


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _check_strings(data: Dict[str, Any], required: List[str], optional: List[str]) -> List[str]:
    errors: List[str] = []
    for f in required:
        if f not in data:
            errors.append(f"Missing required field: {f}")
        elif not _is_non_empty_str(data[f]):
            errors.append(f"Field '{f}' must be a non-empty string")
    for f in optional:
        if data.get(f) is not None and not isinstance(data[f], str):
            errors.append(f"Field '{f}' must be a string if provided")
    return errors


def _check_tags(data: Dict[str, Any], field: str) -> List[str]:
    if field not in data:
        return []
    tags = data[field]
    if not isinstance(tags, list):
        return [f"Field '{field}' must be a list of strings"]
    if not all(_is_non_empty_str(t) for t in tags):
        return [f"Field '{field}' must only contain non-empty strings"]
    return []


def validate_worker(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Only shape is checked; tag contents are stored as given.
    """
    errors = _check_strings(data, WORKER_REQUIRED_STR_FIELDS, WORKER_OPTIONAL_STR_FIELDS)
    errors.extend(_check_tags(data, "skills"))

    years = data.get("experience_years", 0)
    # bool is an int subclass
    if isinstance(years, bool) or not isinstance(years, int):
        errors.append("Field 'experience_years' must be an integer")
    elif years < 0:
        errors.append("Field 'experience_years' must not be negative")

    return errors


def validate_job(data: Dict[str, Any]) -> List[str]:
    """Returns a list of validation error messages. Empty list means valid."""
    errors = _check_strings(data, JOB_REQUIRED_STR_FIELDS, JOB_OPTIONAL_STR_FIELDS)
    errors.extend(_check_tags(data, "requirements"))

    job_type = data.get("job_type")
    if isinstance(job_type, str) and job_type not in JOB_TYPES:
        errors.append(f"Field 'job_type' must be one of: {', '.join(JOB_TYPES)}")

    if "is_active" in data and not isinstance(data["is_active"], bool):
        errors.append("Field 'is_active' must be a boolean if provided")

    return errors


def normalize_match_query(
    min_score: Optional[float] = None,
    limit: Optional[int] = None,
    default_limit: int = 50,
    max_limit: int = 100,
) -> Tuple[float, int]:
    """
    Apply defaults and clamps to match parameters.

    Args:
        min_score: Minimum composite score (default 0.0)
        limit: Result cap (default default_limit, clamped to [0, max_limit])

    Returns:
        Tuple of (min_score, limit)

    Raises:
        InvalidQuery: if min_score is NaN or infinite
    """
    min_score = 0.0 if min_score is None else float(min_score)
    if not math.isfinite(min_score):
        raise InvalidQuery(f"min_score must be a finite number, got {min_score}")

    limit = default_limit if limit is None else int(limit)
    limit = max(0, min(limit, max_limit))
    return min_score, limit
