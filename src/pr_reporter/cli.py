"""CLI interface for PR Reporter."""

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from pr_reporter import __version__
from pr_reporter.config import Config
from pr_reporter.output.console import print_summary
from pr_reporter.output.render import TABLE_OUTPUT, is_json_output, render
from pr_reporter.services.github_search_client import GitHubSearchClient
from pr_reporter.services.summary import summarize
from pr_reporter.utils.dates import DateRange

app = typer.Typer(
    name="pr-reporter",
    help="Generates a report of GitHub pull requests for a given month.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Configure logging based on verbosity level."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"pr-reporter version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    month: int = typer.Option(
        ...,
        "--month",
        "-m",
        help="Month to report on (1-12)",
    ),
    year: int = typer.Option(
        2024,
        "--year",
        "-y",
        help="Year to report on",
    ),
    output: str = typer.Option(
        TABLE_OUTPUT,
        "--output",
        "-o",
        help="Output format: 'json', anything else prints a table",
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        help="Also print per-contributor totals by category (table output only)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log warnings and errors",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Report the pull requests created in REPO_OWNER/REPO_NAME during a month.

    Requires GITHUB_TOKEN, REPO_OWNER and REPO_NAME in the environment or in a
    .env file.

    Examples:
        pr-reporter --month 6
        pr-reporter --year 2023 --month 12 --output json
        pr-reporter -m 3 --summary
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        run(year=year, month=month, output=output, show_summary=summary)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Report cancelled[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"[red]Application error:[/red] {escape(str(e))}", soft_wrap=True)
        if verbose:
            err_console.print_exception()
        raise typer.Exit(1)


def run(year: int, month: int, output: str, show_summary: bool = False) -> None:
    """Fetch, aggregate and render the report."""
    config = Config.from_env()
    date_range = DateRange.for_month(year, month)

    logger.debug("Reporting on %s for %s", config.repo_full_name, date_range)

    with GitHubSearchClient(config) as client:
        pull_requests = client.fetch_all(config.repo_owner, config.repo_name, date_range)

    summaries = summarize(pull_requests)

    render(pull_requests, config.repo_name, output, console=console)

    if show_summary and not is_json_output(output):
        console.print()
        print_summary(summaries, console)


if __name__ == "__main__":
    app()
