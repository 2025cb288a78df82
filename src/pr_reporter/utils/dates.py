"""Date range and duration utilities."""

from dataclasses import dataclass
from datetime import date, datetime

from pr_reporter.exceptions import InvalidDateError, TimestampParseError
from pr_reporter.models.pull_request import PullRequest

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class DateRange:
    """A calendar month: ``start`` is inclusive, ``end`` is exclusive."""

    start: date
    end: date

    @classmethod
    def for_month(cls, year: int, month: int) -> "DateRange":
        """Build the range covering ``month`` of ``year``.

        Args:
            year: Calendar year
            month: Month number (1-12)

        Returns:
            DateRange from the first day of the month to the first day of the
            following month (rolling over to January of the next year).

        Raises:
            InvalidDateError: If year and month do not form a valid date.
        """
        try:
            start = date(year, month, 1)
            if month == 12:
                end = date(year + 1, 1, 1)
            else:
                end = date(year, month + 1, 1)
        except (ValueError, OverflowError) as e:
            raise InvalidDateError(year, month) from e
        return cls(start=start, end=end)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


def parse_timestamp(value: str | None) -> datetime:
    """Parse a GitHub ``YYYY-MM-DDTHH:MM:SSZ`` timestamp.

    Raises:
        TimestampParseError: If the value is missing or in any other format.
    """
    if value is None:
        raise TimestampParseError(value)
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise TimestampParseError(value) from e


def completion_dates(pr: PullRequest) -> tuple[date, date]:
    """Get the creation date and completion date of a pull request.

    Pull requests that are still open complete on their creation date.
    """
    start_date = parse_timestamp(pr.created_at).date()
    if pr.closed_at:
        end_date = parse_timestamp(pr.closed_at).date()
    else:
        end_date = start_date
    return start_date, end_date


def days_to_complete(pr: PullRequest) -> int:
    """Inclusive number of days between creation and completion.

    A pull request opened and closed on the same day took 1 day.
    """
    start_date, end_date = completion_dates(pr)
    return (end_date - start_date).days + 1
