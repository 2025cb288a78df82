"""Per-contributor aggregation of pull requests."""

from pr_reporter.models.pull_request import PullRequest
from pr_reporter.models.summary import Category, ContributorSummary
from pr_reporter.services.classifier import categorize
from pr_reporter.utils.dates import days_to_complete

UNKNOWN_CONTRIBUTOR = "Unknown Contributor"


def summarize(pull_requests: list[PullRequest]) -> dict[str, ContributorSummary]:
    """Group pull requests by contributor and category.

    Each contributor starts with a zeroed tally for every category; every pull
    request adds one to the count of its category and its days to complete to
    the total.

    Args:
        pull_requests: Pull requests to aggregate

    Returns:
        Mapping of contributor login to summary, in order of first appearance

    Raises:
        TimestampParseError: If a pull request has a malformed timestamp.
    """
    summaries: dict[str, ContributorSummary] = {}

    for pr in pull_requests:
        category = categorize(pr.title) or Category.UNLABELED
        login = pr.author_login or UNKNOWN_CONTRIBUTOR

        summary = summaries.get(login)
        if summary is None:
            summary = summaries[login] = ContributorSummary(login=login)

        summary.update(category, days_to_complete(pr))

    return summaries
