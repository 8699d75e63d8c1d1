"""Typed results returned by GitHub clients."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Self


class BranchLookupOutcome(str, Enum):
    """Outcome of looking up a branch by name."""

    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class PullRequestRecord:
    """The fields of a pull request needed to reconcile and report it."""

    number: int
    html_url: str
    head_ref: str
    base_ref: str

    @classmethod
    def from_github(cls, pull_request: Any) -> Self:
        """Build a record from a githubkit PullRequest or PullRequestSimple model."""
        return cls(
            number=pull_request.number,
            html_url=str(pull_request.html_url),
            head_ref=pull_request.head.ref,
            base_ref=pull_request.base.ref,
        )
