"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod

from .models import BranchLookupOutcome, PullRequestRecord


class SyncHostingClientBase(ABC):
    """Base ABC for the GitHub capabilities needed to synchronize branches.

    Implementations raise UnexpectedHostingError for any failure other than
    a missing branch, which is reported as BranchLookupOutcome.NOT_FOUND.
    """

    # Branch and reference operations
    @abstractmethod
    async def fetch_branch(self, branch_name: str) -> BranchLookupOutcome:
        """Look up a branch by name."""
        pass

    @abstractmethod
    async def create_ref(self, ref: str, sha: str) -> None:
        """Create a fully-qualified reference pointing at a commit."""
        pass

    # Pull Request operations
    @abstractmethod
    async def list_pull_requests(self) -> list[PullRequestRecord]:
        """List all open pull requests for the repository."""
        pass

    @abstractmethod
    async def create_pull_request(
        self,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
        draft: bool = False,
    ) -> PullRequestRecord:
        """Create a pull request for the repository."""
        pass
