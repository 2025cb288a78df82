"""GitHub Search API client."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from pr_reporter import __version__
from pr_reporter.config import Config
from pr_reporter.exceptions import ApiRequestFailedError, ResponseParseError
from pr_reporter.models.pull_request import PullRequest, SearchPage
from pr_reporter.utils.dates import DateRange
from pr_reporter.utils.pagination import build_search_query, build_search_url

logger = logging.getLogger(__name__)


class GitHubSearchClient:
    """Blocking client for the GitHub issue search endpoint."""

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"pr-reporter/{__version__}",
            "Authorization": f"Bearer {self.config.github_token}",
        }

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "GitHubSearchClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def fetch_page(self, query: str, page: int) -> SearchPage:
        """Fetch and parse a single page of search results.

        Raises:
            ApiRequestFailedError: If GitHub answers with a non-success status.
            ResponseParseError: If the body is not a valid page of results.
        """
        url = build_search_url(
            query,
            page,
            per_page=self.config.per_page,
            api_url=self.config.github_api_url,
        )
        logger.info("Fetching page %d: %s", page, url)

        response = self._get_client().get(url)
        body = response.text

        if not response.is_success:
            logger.error(
                "GitHub API request failed with status %d: %s",
                response.status_code,
                body,
            )
            raise ApiRequestFailedError(
                f"GitHub API request failed with status {response.status_code}",
                status_code=response.status_code,
                response_body=body,
            )

        try:
            return SearchPage.model_validate_json(body)
        except ValidationError as e:
            logger.error("Failed to parse JSON response: %s\nResponse body: %s", e, body)
            raise ResponseParseError(
                f"Failed to parse search response from page {page}",
                error=e,
                raw_body=body,
            ) from e

    def fetch_all(
        self,
        owner: str,
        repo: str,
        date_range: DateRange,
    ) -> list[PullRequest]:
        """Fetch every pull request created in a repository within a date range.

        Pages are requested one after another until a page comes back empty or
        ``config.max_pages`` pages have been fetched. Results beyond that cap
        are not retrieved.

        Args:
            owner: Repository owner
            repo: Repository name
            date_range: Creation window (start inclusive, end exclusive)

        Returns:
            Pull requests in page order, API order within each page
        """
        query = build_search_query(owner, repo, date_range)
        pull_requests: list[PullRequest] = []

        for page in range(1, self.config.max_pages + 1):
            search_page = self.fetch_page(query, page)
            if not search_page.items:
                break
            pull_requests.extend(search_page.items)
        else:
            logger.warning(
                "Stopped after %d pages; results beyond %d pull requests are not included",
                self.config.max_pages,
                len(pull_requests),
            )

        logger.debug("Found %d pull requests", len(pull_requests))
        return pull_requests
