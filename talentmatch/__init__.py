"""talentmatch: compatibility scoring and ranking for jobs and workers."""

__version__ = "0.1.0"
