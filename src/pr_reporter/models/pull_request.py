"""Pull request and search result models."""

from pydantic import BaseModel, ConfigDict, Field


class GitHubUser(BaseModel):
    """Author of a pull request as embedded in search results."""

    model_config = ConfigDict(frozen=True)

    login: str


class PullRequest(BaseModel):
    """Pull request from the Search API (issue projection).

    Field names follow the domain; the wire names (``user``, ``html_url``)
    are kept as aliases so that dumping with ``by_alias=True`` reproduces the
    shape returned by GitHub.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int
    title: str
    body: str | None = None
    author: GitHubUser | None = Field(default=None, alias="user")
    created_at: str
    closed_at: str | None = None
    url: str = Field(alias="html_url")

    @property
    def author_login(self) -> str | None:
        """Login of the author, if GitHub returned one."""
        return self.author.login if self.author else None


class SearchPage(BaseModel):
    """One page of results from ``/search/issues``."""

    items: list[PullRequest]
