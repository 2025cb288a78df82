"""Presentation-only models."""

from pydantic import BaseModel


class ReportRow(BaseModel):
    """One row of the pull request table."""

    number: int
    title: str
    description: str
    developer: str
    repository: str
    start_to_end: str
    workdays: str
    url: str
