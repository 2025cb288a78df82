"""JSON output for fetched pull requests."""

import json
import sys
from typing import Any, Optional, TextIO

from pr_reporter.models.pull_request import PullRequest


def serialize_pull_requests(pull_requests: list[PullRequest]) -> list[dict[str, Any]]:
    """Convert pull requests back into their API-shaped dictionaries."""
    return [pr.model_dump(by_alias=True) for pr in pull_requests]


def format_json(pull_requests: list[PullRequest]) -> str:
    """Pretty-print pull requests as a JSON array."""
    return json.dumps(
        serialize_pull_requests(pull_requests),
        indent=2,
        ensure_ascii=False,
    )


def write_json(
    pull_requests: list[PullRequest],
    stream: Optional[TextIO] = None,
) -> None:
    """Write pull requests as JSON to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(format_json(pull_requests))
    stream.write("\n")
