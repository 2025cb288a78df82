"""Services for PR Reporter."""

from pr_reporter.services.classifier import categorize
from pr_reporter.services.github_search_client import GitHubSearchClient
from pr_reporter.services.summary import summarize

__all__ = ["GitHubSearchClient", "categorize", "summarize"]
