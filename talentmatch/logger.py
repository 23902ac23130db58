"""
Structured logging system for talentmatch.

Provides centralized logging with console and file outputs,
log levels, and metrics tracking for match runs.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for matching activity.
    """

    def __init__(
        self,
        name: str = "talentmatch",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (None disables the file handler)
            enable_file: Write logs to file
            enable_console: Output logs to console (stderr, stdout carries command output)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()
        self.logger.propagate = False

        self.metrics = {
            "match_runs": 0,
            "runs_by_direction": {},
            "candidates_scored": 0,
            "survivors_returned": 0,
            "anchors_not_found": 0,
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file and log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"talentmatch_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def close(self):
        """Detach and close all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_match_run(self, direction: str, scored: int, returned: int):
        """Record one ranking pass and its pool/result sizes."""
        self.metrics["match_runs"] += 1
        self.metrics["candidates_scored"] += scored
        self.metrics["survivors_returned"] += returned
        runs = self.metrics["runs_by_direction"]
        runs[direction] = runs.get(direction, 0) + 1

    def record_anchor_not_found(self):
        self.metrics["anchors_not_found"] += 1

    def get_metrics(self) -> dict:
        """Return a copy of the current metrics."""
        metrics_copy = dict(self.metrics)
        metrics_copy["runs_by_direction"] = dict(self.metrics["runs_by_direction"])
        runs = metrics_copy["match_runs"]
        metrics_copy["average_survivors"] = (
            round(metrics_copy["survivors_returned"] / runs, 2) if runs else 0.0
        )
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Matching Session Metrics ===")
        self.info(f"Match runs: {metrics['match_runs']}")
        self.info(
            f"Candidates scored: {metrics['candidates_scored']}, "
            f"returned: {metrics['survivors_returned']} "
            f"(avg {metrics['average_survivors']} per run)"
        )
        if metrics["runs_by_direction"]:
            self.info("Runs by direction:")
            for direction, count in metrics["runs_by_direction"].items():
                self.info(f"  {direction}: {count}")
        if metrics["anchors_not_found"]:
            self.info(f"Anchors not found: {metrics['anchors_not_found']}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "talentmatch",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = None
