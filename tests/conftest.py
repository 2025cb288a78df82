"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable

import httpx
import pytest

from pr_reporter.config import Config
from pr_reporter.models.pull_request import PullRequest


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's .env file out of the tests."""
    monkeypatch.setattr("pr_reporter.config.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    return Config(
        github_token="test_token",
        repo_owner="octocat",
        repo_name="hello-world",
    )


@pytest.fixture
def env_config(monkeypatch):
    """Set the required environment variables."""
    monkeypatch.setenv("GITHUB_TOKEN", "test_token")
    monkeypatch.setenv("REPO_OWNER", "octocat")
    monkeypatch.setenv("REPO_NAME", "hello-world")
    monkeypatch.delenv("GITHUB_API_URL", raising=False)


def make_item(
    number: int = 1,
    title: str = "fix: correct off-by-one",
    body: str | None = "Fixes the loop bound",
    login: str | None = "octocat",
    created_at: str = "2024-06-01T09:00:00Z",
    closed_at: str | None = "2024-06-03T17:30:00Z",
) -> dict[str, Any]:
    """Build a Search API item the way GitHub returns it."""
    return {
        "number": number,
        "title": title,
        "body": body,
        "user": {"login": login, "id": 583231} if login else None,
        "state": "closed" if closed_at else "open",
        "created_at": created_at,
        "closed_at": closed_at,
        "html_url": f"https://github.com/octocat/hello-world/pull/{number}",
        "repository_url": "https://api.github.com/repos/octocat/hello-world",
    }


def make_pr(**kwargs) -> PullRequest:
    """Build a PullRequest model from a Search API item."""
    return PullRequest.model_validate(make_item(**kwargs))


class StubSearchAPI:
    """Stand-in for ``/search/issues`` that serves pages from a callable."""

    def __init__(self, page_handler: Callable[[int], httpx.Response]):
        self.page_handler = page_handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = int(request.url.params["page"])
        return self.page_handler(page)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def pages_requested(self) -> list[int]:
        return [int(r.url.params["page"]) for r in self.requests]


def full_page(page: int, size: int = 100) -> httpx.Response:
    """A page of ``size`` items numbered by page and position."""
    items = [make_item(number=(page - 1) * size + i + 1) for i in range(size)]
    return httpx.Response(200, text=json.dumps({"total_count": 5000, "items": items}))


def empty_page() -> httpx.Response:
    return httpx.Response(200, text=json.dumps({"total_count": 0, "items": []}))

