"""Structured logging configuration for reporting and application events."""

import logging
import sys

from webstore.core.config import get_settings

settings = get_settings()

# Create logger for application events
app_logger = logging.getLogger("webstore")
app_logger.setLevel(settings.LOG_LEVEL.upper())

# Create logger for report execution events
reporting_logger = logging.getLogger("webstore.reporting")

# Create console handler with structured format
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(settings.LOG_LEVEL.upper())

# Create formatter
formatter = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
console_handler.setFormatter(formatter)

# Add handler to the root application logger if not already added
if not app_logger.handlers:
    app_logger.addHandler(console_handler)


def log_report_executed(report_id: str, row_count: int, duration_ms: float) -> None:
    """
    Log a successful report execution.

    Args:
        report_id: Report identifier (e.g., 'pending-orders').
        row_count: Number of rows produced.
        duration_ms: Wall-clock duration in milliseconds.
    """
    reporting_logger.info(
        f"Report executed - report_id={report_id}, rows={row_count}, "
        f"duration_ms={duration_ms:.1f}"
    )


def log_report_failed(report_id: str, reason: str) -> None:
    """
    Log a failed report execution.

    Args:
        report_id: Report identifier.
        reason: Error code or message describing the failure.
    """
    reporting_logger.error(f"Report failed - report_id={report_id}, reason={reason}")
