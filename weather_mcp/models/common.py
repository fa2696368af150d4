"""Common types and helpers shared across models."""

from datetime import date, datetime
from enum import StrEnum


class ReportKind(StrEnum):
    CURRENT = "current"
    DAILY = "forecast"
    HOURLY = "hourly"


def local_today() -> date:
    """Calendar date in the process's local timezone."""
    return datetime.now().date()
