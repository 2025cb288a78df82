"""Pull request categorization by conventional-commit title prefix."""

import logging
import re
from typing import Optional

from pr_reporter.models.summary import Category

logger = logging.getLogger(__name__)

# Searched anywhere in the title, in order; the first match wins.
CATEGORY_PATTERNS: list[tuple[re.Pattern[str], Category]] = [
    (re.compile(rf"\s*{category.value}:", re.IGNORECASE), category)
    for category in (
        Category.FIX,
        Category.FEAT,
        Category.REFACTOR,
        Category.TEST,
        Category.BUILD,
        Category.CHORE,
    )
]


def categorize(title: str) -> Optional[Category]:
    """Get the category of a pull request from the conventional-commit tag in its title.

    Args:
        title: Pull request title, e.g. ``"fix: correct off-by-one"``

    Returns:
        The first matching category, or None if the title has no known tag
    """
    logger.debug("Title: %s", title)
    for pattern, category in CATEGORY_PATTERNS:
        if pattern.search(title):
            return category
    return None
