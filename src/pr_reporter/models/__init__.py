"""Data models for PR Reporter."""

from pr_reporter.models.pull_request import GitHubUser, PullRequest, SearchPage
from pr_reporter.models.report import ReportRow
from pr_reporter.models.summary import Category, CategoryTally, ContributorSummary

__all__ = [
    "GitHubUser",
    "PullRequest",
    "SearchPage",
    "Category",
    "CategoryTally",
    "ContributorSummary",
    "ReportRow",
]
