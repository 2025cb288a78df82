"""Tests for the GitHub Search API client."""

import json
import logging

import httpx
import pytest

from pr_reporter.exceptions import ApiRequestFailedError, ResponseParseError
from pr_reporter.services.github_search_client import GitHubSearchClient
from pr_reporter.utils.dates import DateRange

from conftest import StubSearchAPI, empty_page, full_page, make_item

JUNE_2024 = DateRange.for_month(2024, 6)


def fetch_all(config, api: StubSearchAPI):
    with GitHubSearchClient(config, transport=api.transport) as client:
        return client.fetch_all("octocat", "hello-world", JUNE_2024)


class TestPagination:
    """Tests for the page loop."""

    def test_stops_on_empty_page(self, test_config):
        """Test two full pages followed by an empty one."""
        api = StubSearchAPI(lambda page: full_page(page) if page <= 2 else empty_page())

        prs = fetch_all(test_config, api)

        assert len(prs) == 200
        assert [pr.number for pr in prs] == list(range(1, 201))
        assert api.pages_requested == [1, 2, 3]

    def test_stops_at_page_cap(self, test_config):
        """Test that an endless result set is cut at 10 pages."""
        api = StubSearchAPI(full_page)

        prs = fetch_all(test_config, api)

        assert len(prs) == 1000
        assert api.pages_requested == list(range(1, 11))

    def test_page_cap_logs_warning(self, test_config, caplog):
        api = StubSearchAPI(full_page)

        with caplog.at_level(logging.WARNING):
            fetch_all(test_config, api)

        assert "Stopped after 10 pages" in caplog.text

    def test_partial_last_page(self, test_config):
        api = StubSearchAPI(
            lambda page: full_page(page, size=3) if page == 1 else empty_page()
        )

        prs = fetch_all(test_config, api)

        assert [pr.number for pr in prs] == [1, 2, 3]
        assert api.pages_requested == [1, 2]

    def test_no_results(self, test_config):
        api = StubSearchAPI(lambda page: empty_page())

        assert fetch_all(test_config, api) == []
        assert api.pages_requested == [1]

    def test_boundary_day_is_passed_through(self, test_config):
        """Test that a PR created on the exclusive end date is not filtered out.

        GitHub's ``created:a..b`` matches both ends, so the API may return it.
        """
        boundary = make_item(number=9, created_at="2024-07-01T00:00:00Z", closed_at=None)
        api = StubSearchAPI(
            lambda page: httpx.Response(200, json={"items": [boundary]}) if page == 1 else empty_page()
        )

        prs = fetch_all(test_config, api)

        assert [pr.number for pr in prs] == [9]
        assert api.requests[0].url.params["q"].endswith("created:2024-06-01..2024-07-01")

    def test_logs_page_and_url(self, test_config, caplog):
        api = StubSearchAPI(lambda page: empty_page())

        with caplog.at_level(logging.INFO, logger="pr_reporter.services.github_search_client"):
            fetch_all(test_config, api)

        assert "Fetching page 1: https://api.github.com/search/issues?q=" in caplog.text


class TestRequest:
    """Tests for the request sent to GitHub."""

    def test_query_parameters(self, test_config):
        api = StubSearchAPI(lambda page: empty_page())
        fetch_all(test_config, api)

        params = api.requests[0].url.params
        assert api.requests[0].method == "GET"
        assert api.requests[0].url.path == "/search/issues"
        assert params["q"] == "repo:octocat/hello-world is:pr created:2024-06-01..2024-07-01"
        assert params["per_page"] == "100"
        assert params["page"] == "1"

    def test_headers(self, test_config):
        api = StubSearchAPI(lambda page: empty_page())
        fetch_all(test_config, api)

        headers = api.requests[0].headers
        assert headers["Authorization"] == "Bearer test_token"
        assert headers["Accept"] == "application/vnd.github+json"
        assert headers["User-Agent"].startswith("pr-reporter/")


class TestErrors:
    """Tests for error handling."""

    def test_non_success_status(self, test_config, caplog):
        """Test that an error status aborts the fetch with its body."""
        body = json.dumps({"message": "Bad credentials"})
        api = StubSearchAPI(
            lambda page: full_page(page) if page == 1 else httpx.Response(401, text=body)
        )

        with pytest.raises(ApiRequestFailedError) as exc_info:
            fetch_all(test_config, api)

        assert exc_info.value.status_code == 401
        assert exc_info.value.response_body == body
        assert "401" in str(exc_info.value)
        assert api.pages_requested == [1, 2]
        assert "Bad credentials" in caplog.text

    def test_server_error_not_retried(self, test_config):
        api = StubSearchAPI(lambda page: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(ApiRequestFailedError) as exc_info:
            fetch_all(test_config, api)

        assert exc_info.value.status_code == 502
        assert api.pages_requested == [1]

    def test_malformed_json(self, test_config, caplog):
        api = StubSearchAPI(lambda page: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ResponseParseError) as exc_info:
            fetch_all(test_config, api)

        assert exc_info.value.raw_body == "<html>oops</html>"
        assert exc_info.value.error is not None
        assert "<html>oops</html>" in caplog.text

    def test_missing_items(self, test_config):
        api = StubSearchAPI(lambda page: httpx.Response(200, json={"total_count": 0}))

        with pytest.raises(ResponseParseError):
            fetch_all(test_config, api)

    def test_malformed_item(self, test_config):
        """Test that an item without required fields fails the whole page."""
        item = make_item()
        del item["created_at"]
        api = StubSearchAPI(lambda page: httpx.Response(200, json={"items": [item]}))

        with pytest.raises(ResponseParseError):
            fetch_all(test_config, api)

    def test_transport_error_propagates(self, test_config):
        def fail(page):
            raise httpx.ConnectError("connection refused")

        api = StubSearchAPI(fail)

        with pytest.raises(httpx.ConnectError):
            fetch_all(test_config, api)


class TestClientLifecycle:
    """Tests for client setup and teardown."""

    def test_context_manager_closes(self, test_config):
        api = StubSearchAPI(lambda page: empty_page())
        client = GitHubSearchClient(test_config, transport=api.transport)

        with client:
            client.fetch_all("octocat", "hello-world", JUNE_2024)

        assert client._client.is_closed

    def test_close_without_requests(self, test_config):
        client = GitHubSearchClient(test_config)
        client.close()
        assert client._client is None
