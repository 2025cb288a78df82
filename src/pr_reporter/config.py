"""Configuration management for PR Reporter."""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from pr_reporter.exceptions import MissingConfigurationError
from pr_reporter.utils.pagination import DEFAULT_API_URL, DEFAULT_PER_PAGE, MAX_PAGES

REQUIRED_VARIABLES = ("GITHUB_TOKEN", "REPO_OWNER", "REPO_NAME")


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    github_token: str
    repo_owner: str
    repo_name: str
    github_api_url: str = DEFAULT_API_URL

    # Pagination
    per_page: int = DEFAULT_PER_PAGE
    max_pages: int = MAX_PAGES

    # Timeouts
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            MissingConfigurationError: If any of GITHUB_TOKEN, REPO_OWNER or
                REPO_NAME is unset or empty.
        """
        # override=False ensures environment variables take precedence over .env
        load_dotenv(find_dotenv(usecwd=True), override=False)

        values = {}
        for name in REQUIRED_VARIABLES:
            value = os.getenv(name)
            if not value:
                raise MissingConfigurationError(name)
            values[name] = value

        return cls(
            github_token=values["GITHUB_TOKEN"],
            repo_owner=values["REPO_OWNER"],
            repo_name=values["REPO_NAME"],
            github_api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL),
        )

    @property
    def repo_full_name(self) -> str:
        """Repository in ``owner/name`` form."""
        return f"{self.repo_owner}/{self.repo_name}"
