"""Output mode selection."""

from typing import Optional

from rich.console import Console

from pr_reporter.models.pull_request import PullRequest
from pr_reporter.output.console import print_table
from pr_reporter.output.json_writer import write_json

JSON_OUTPUT = "json"
TABLE_OUTPUT = "table"


def is_json_output(output_format: str) -> bool:
    """Check whether the output format selects JSON (case-insensitive)."""
    return output_format.lower() == JSON_OUTPUT


def render(
    pull_requests: list[PullRequest],
    repository_name: str,
    output_format: str = TABLE_OUTPUT,
    console: Optional[Console] = None,
) -> None:
    """Render pull requests to standard output.

    Args:
        pull_requests: Pull requests to render
        repository_name: Repository shown in the table's Repo column
        output_format: ``"json"`` for JSON; any other value renders a table
        console: Console for table output (defaults to stdout)
    """
    if is_json_output(output_format):
        write_json(pull_requests, stream=console.file if console else None)
    else:
        print_table(pull_requests, repository_name, console or Console())
