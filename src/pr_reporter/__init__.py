"""PR Reporter - Monthly pull request reports for a GitHub repository.

Fetches the pull requests created in a repository during a calendar month
through the GitHub Search API, classifies them by conventional-commit title
prefix and renders them as a table or as JSON.

Example usage:
    ```python
    from pr_reporter import Config, DateRange, GitHubSearchClient, summarize

    config = Config.from_env()
    with GitHubSearchClient(config) as client:
        prs = client.fetch_all(config.repo_owner, config.repo_name, DateRange.for_month(2024, 6))

    for login, summary in summarize(prs).items():
        print(login, summary.total_count)
    ```
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pr-reporter")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

from pr_reporter.config import Config
from pr_reporter.exceptions import (
    ApiRequestFailedError,
    InvalidDateError,
    MissingConfigurationError,
    PRReporterError,
    ResponseParseError,
    TimestampParseError,
)
from pr_reporter.models import (
    Category,
    CategoryTally,
    ContributorSummary,
    GitHubUser,
    PullRequest,
    ReportRow,
    SearchPage,
)
from pr_reporter.services import GitHubSearchClient, categorize, summarize
from pr_reporter.utils import DateRange, days_to_complete

__all__ = [
    # Client
    "GitHubSearchClient",
    # Configuration
    "Config",
    # Exceptions
    "PRReporterError",
    "InvalidDateError",
    "ApiRequestFailedError",
    "ResponseParseError",
    "TimestampParseError",
    "MissingConfigurationError",
    # Models
    "PullRequest",
    "GitHubUser",
    "SearchPage",
    "Category",
    "CategoryTally",
    "ContributorSummary",
    "ReportRow",
    # Operations
    "DateRange",
    "days_to_complete",
    "categorize",
    "summarize",
]
