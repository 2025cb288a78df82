"""Utility modules for PR Reporter."""

from pr_reporter.utils.dates import (
    DateRange,
    completion_dates,
    days_to_complete,
    parse_timestamp,
)
from pr_reporter.utils.pagination import (
    MAX_PAGES,
    build_search_query,
    build_search_url,
)

__all__ = [
    "DateRange",
    "parse_timestamp",
    "completion_dates",
    "days_to_complete",
    "MAX_PAGES",
    "build_search_query",
    "build_search_url",
]
