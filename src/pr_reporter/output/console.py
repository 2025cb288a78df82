"""Rich table output for fetched pull requests."""

from rich import box
from rich.cells import cell_len, set_cell_size
from rich.console import Console, RenderableType
from rich.measure import Measurement
from rich.segment import Segments
from rich.table import Table
from rich.text import Text

from pr_reporter.models.pull_request import PullRequest
from pr_reporter.models.report import ReportRow
from pr_reporter.models.summary import Category, ContributorSummary
from pr_reporter.utils.dates import completion_dates, days_to_complete

NO_DESCRIPTION = "No description"
UNKNOWN_DEVELOPER = "Unknown"
TRUNCATION_SUFFIX = "..."

# Upper bound when measuring a table's natural width.
MAX_RENDER_WIDTH = 10_000


def truncate(value: str, width: int, suffix: str = TRUNCATION_SUFFIX) -> Text:
    """Cut ``value`` to ``width`` cells, ending in ``suffix`` when shortened."""
    if cell_len(value) <= width:
        return Text(value)
    return Text(set_cell_size(value, width - len(suffix)) + suffix)


def print_natural_width(console: Console, renderable: RenderableType) -> None:
    """Print ``renderable`` at the width it needs rather than the console width.

    Wrapping columns then break only at their own limits, whatever the
    terminal size; lines wider than the terminal are not cropped.
    """
    width = Measurement.get(
        console, console.options.update_width(MAX_RENDER_WIDTH), renderable
    ).maximum
    segments = console.render(renderable, console.options.update_width(width))
    console.print(Segments(segments), crop=False)


def build_rows(pull_requests: list[PullRequest], repository_name: str) -> list[ReportRow]:
    """Project pull requests into table rows.

    Raises:
        TimestampParseError: If any pull request has a malformed timestamp.
            No rows are returned in that case.
    """
    rows = []
    for pr in pull_requests:
        start_date, end_date = completion_dates(pr)
        rows.append(
            ReportRow(
                number=pr.number,
                title=pr.title,
                description=pr.body if pr.body is not None else NO_DESCRIPTION,
                developer=pr.author_login or UNKNOWN_DEVELOPER,
                repository=repository_name,
                start_to_end=f"{start_date.isoformat()} - {end_date.isoformat()}",
                workdays=str(days_to_complete(pr)),
                url=pr.url,
            )
        )
    return rows


def build_table(rows: list[ReportRow]) -> Table:
    """Build the pull request table.

    Task, Description and Dev wrap on word boundaries; Repo, Start to End and
    Work Days are cut to a single line ending in "...".
    """
    table = Table(box=box.SQUARE, show_lines=True)
    table.add_column("#", justify="right")
    table.add_column("Task", max_width=30, overflow="fold")
    table.add_column("Description", max_width=40, overflow="fold")
    table.add_column("Dev", max_width=40, overflow="fold")
    table.add_column("Repo", max_width=25, no_wrap=True)
    table.add_column("Start to End", max_width=25, no_wrap=True)
    table.add_column(truncate("Work Days to Complete", 5), max_width=5, no_wrap=True)
    table.add_column("PR URL", overflow="fold")

    for row in rows:
        table.add_row(
            str(row.number),
            Text(row.title),
            Text(row.description),
            Text(row.developer),
            truncate(row.repository, 25),
            truncate(row.start_to_end, 25),
            truncate(row.workdays, 5),
            Text(row.url),
        )

    return table


def print_table(
    pull_requests: list[PullRequest],
    repository_name: str,
    console: Console,
) -> None:
    """Print pull requests as a table."""
    rows = build_rows(pull_requests, repository_name)
    print_natural_width(console, build_table(rows))


def build_summary_table(summaries: dict[str, ContributorSummary]) -> Table:
    """Build a table of pull request count and days per contributor and category."""
    table = Table(title="Contributor Summary", box=box.SQUARE)
    table.add_column("Contributor")
    for category in Category:
        table.add_column(category.value.capitalize(), justify="right")
    table.add_column("Total", justify="right")

    for login, summary in summaries.items():
        cells: list[str | Text] = [Text(login)]
        for category in Category:
            tally = summary.tally(category)
            cells.append(f"{tally.count} / {tally.total_days}d")
        cells.append(f"{summary.total_count} / {summary.total_days}d")
        table.add_row(*cells)

    table.caption = "pull requests / work days to complete"
    return table


def print_summary(summaries: dict[str, ContributorSummary], console: Console) -> None:
    """Print the contributor summary table."""
    if not summaries:
        console.print("[dim]No pull requests to summarize[/dim]")
        return
    print_natural_width(console, build_summary_table(summaries))
