"""Exceptions for PR Reporter.

Exception Hierarchy:
    PRReporterError (base)
    ├── InvalidDateError (year/month do not form a calendar date)
    ├── ApiRequestFailedError (HTTP responses with non-success status codes)
    ├── ResponseParseError (response body is not a valid search page)
    ├── TimestampParseError (created_at/closed_at in an unexpected format)
    └── MissingConfigurationError (required environment variable is unset)

Every error aborts the run; none of them are retried.
"""

__all__ = [
    "PRReporterError",
    "InvalidDateError",
    "ApiRequestFailedError",
    "ResponseParseError",
    "TimestampParseError",
    "MissingConfigurationError",
]


class PRReporterError(Exception):
    """Base exception for all PR Reporter errors."""

    pass


class InvalidDateError(PRReporterError):
    """Raised when a year/month pair cannot form a calendar date."""

    def __init__(self, year: int, month: int):
        super().__init__(f"Invalid date: year={year}, month={month}")
        self.year = year
        self.month = month


class ApiRequestFailedError(PRReporterError):
    """Raised when the GitHub API answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class ResponseParseError(PRReporterError):
    """Raised when a response body cannot be parsed as a page of search results."""

    def __init__(self, message: str, error: Exception, raw_body: str):
        super().__init__(message)
        self.error = error
        self.raw_body = raw_body


class TimestampParseError(PRReporterError):
    """Raised when a timestamp does not match ``YYYY-MM-DDTHH:MM:SSZ``."""

    def __init__(self, value: str | None):
        super().__init__(f"Invalid timestamp: {value!r} (expected YYYY-MM-DDTHH:MM:SSZ)")
        self.value = value


class MissingConfigurationError(PRReporterError):
    """Raised when a required environment variable is not set."""

    def __init__(self, variable: str):
        super().__init__(
            f"{variable} must be set in .env file or environment variables"
        )
        self.variable = variable
