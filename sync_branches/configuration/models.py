"""Data models describing a single synchronization run."""

from dataclasses import dataclass, field

from sync_branches.utils.constants import DEFAULT_GITHUB_API_URL
from sync_branches.utils.helpers import generate_sync_branch_name, short_source_name


@dataclass(frozen=True)
class SyncRequest:
    """Inputs of the sync-branches action, read once at start."""

    source_ref: str
    target_ref: str
    credential: str = field(repr=False)
    webhook_url: str | None = field(default=None, repr=False)
    github_api_url: str = DEFAULT_GITHUB_API_URL
    debug: bool = False

    @property
    def short_source_name(self) -> str:
        """Source branch name without its ref prefix."""
        return short_source_name(self.source_ref)


@dataclass(frozen=True)
class RepositoryContext:
    """Repository and commit the run was triggered for."""

    owner_login: str
    repo_name: str
    commit_sha: str

    @property
    def full_name(self) -> str:
        """Repository in 'owner/repo' format."""
        return f"{self.owner_login}/{self.repo_name}"

    def sync_branch_name(self, request: SyncRequest) -> str:
        """Name of the branch mirroring the request's source at this commit."""
        return generate_sync_branch_name(request.target_ref, request.source_ref, self.commit_sha)
