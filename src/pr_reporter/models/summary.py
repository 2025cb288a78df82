"""Per-contributor summary models."""

from enum import Enum

from pydantic import BaseModel, Field


class Category(str, Enum):
    """Conventional-commit style pull request categories."""

    FIX = "fix"
    FEAT = "feat"
    REFACTOR = "refactor"
    TEST = "test"
    BUILD = "build"
    CHORE = "chore"
    UNLABELED = "unlabeled"


class CategoryTally(BaseModel):
    """Number of pull requests in a category and the days they took."""

    category: Category
    count: int = 0
    total_days: int = 0

    def add(self, days: int) -> None:
        """Account for one more pull request that took ``days`` days."""
        self.count += 1
        self.total_days += days


def _empty_tallies() -> dict[Category, CategoryTally]:
    return {category: CategoryTally(category=category) for category in Category}


class ContributorSummary(BaseModel):
    """All category tallies for a single contributor."""

    login: str
    tallies: dict[Category, CategoryTally] = Field(default_factory=_empty_tallies)

    def update(self, category: Category, days: int) -> None:
        """Add a pull request to the tally of ``category``."""
        self.tallies[category].add(days)

    def tally(self, category: Category) -> CategoryTally:
        """Get the tally for ``category``."""
        return self.tallies[category]

    @property
    def total_count(self) -> int:
        """Number of pull requests across all categories."""
        return sum(t.count for t in self.tallies.values())

    @property
    def total_days(self) -> int:
        """Days to complete summed across all categories."""
        return sum(t.total_days for t in self.tallies.values())
