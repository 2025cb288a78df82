"""Search query and pagination utilities for the GitHub Search API."""

from urllib.parse import quote

from pr_reporter.utils.dates import DateRange

SEARCH_ISSUES_PATH = "/search/issues"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_PER_PAGE = 100

# Search API never returns more than 1000 results (10 pages * 100); anything
# past the last page is silently dropped.
MAX_PAGES = 10


def build_search_query(owner: str, repo: str, date_range: DateRange) -> str:
    """Build the search filter for pull requests created within a date range.

    Example:
        repo:octocat/hello-world is:pr created:2024-06-01..2024-07-01

    The upper bound is the exclusive end of the range passed through as-is.
    GitHub treats both ends of ``..`` as inclusive, so pull requests created on
    ``date_range.end`` are matched as well.
    """
    start = date_range.start.isoformat()
    end = date_range.end.isoformat()
    return f"repo:{owner}/{repo} is:pr created:{start}..{end}"


def build_search_url(
    query: str,
    page: int,
    per_page: int = DEFAULT_PER_PAGE,
    api_url: str = DEFAULT_API_URL,
) -> str:
    """Build a paginated Search API URL.

    Args:
        query: Search filter (will be percent-encoded)
        page: Page number (1-indexed)
        per_page: Items per page (max 100)
        api_url: Base URL of the GitHub API

    Returns:
        URL with q, per_page and page query parameters
    """
    encoded = quote(query, safe="")
    return (
        f"{api_url.rstrip('/')}{SEARCH_ISSUES_PATH}"
        f"?q={encoded}&per_page={per_page}&page={page}"
    )
