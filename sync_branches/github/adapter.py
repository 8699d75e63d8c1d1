"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GitHubException, RequestFailed
from githubkit.versions.latest.models import GitRef, PullRequest, PullRequestSimple

from sync_branches.utils.constants import DEFAULT_GITHUB_API_URL, PULL_REQUEST_PAGE_SIZE

from .abc import SyncHostingClientBase
from .client import GitHubClient, get_github_token_client
from .exceptions import UnexpectedHostingError
from .models import BranchLookupOutcome, PullRequestRecord

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def raise_unexpected_hosting_error(func: F) -> F:
    """Decorator translating githubkit failures into UnexpectedHostingError, logging GitHub's error details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            status_code = exc.response.status_code
            try:
                error_data = exc.response.json()
            except Exception:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            message = error_data.get("message", str(exc))
            errors = error_data.get("errors", [])
            logger.error(
                "GitHub API request failed",
                function=func.__name__,
                message=message,
                errors=errors,
                status_code=status_code,
            )
            if errors:
                message = f"{message} | errors: {errors}"
            raise UnexpectedHostingError(operation=func.__name__, message=message, status_code=status_code) from exc
        except GitHubException as exc:
            logger.error("GitHub API request could not be completed", function=func.__name__, error=str(exc), error_type=type(exc).__name__)
            raise UnexpectedHostingError(operation=func.__name__, message=str(exc)) from exc

    return wrapper  # type: ignore


class GitHubKitAdapter(SyncHostingClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        owner: str,
        repo_name: str,
        github_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Login of the repository owner
            repo_name: Name of the repository
            github_token: Token used to authenticate (usually the workflow's GITHUB_TOKEN)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_token_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    # Branch and reference operations
    @raise_unexpected_hosting_error
    async def fetch_branch(self, branch_name: str) -> BranchLookupOutcome:
        """Look up a branch, reporting a 404 as NOT_FOUND rather than an error."""
        try:
            await self.client.rest.repos.async_get_branch(owner=self.owner, repo=self.repo_name, branch=branch_name)
        except RequestFailed as exc:
            if exc.response.status_code == 404:
                logger.debug("Branch not found", branch=branch_name)
                return BranchLookupOutcome.NOT_FOUND
            raise
        return BranchLookupOutcome.FOUND

    @raise_unexpected_hosting_error
    async def create_ref(self, ref: str, sha: str) -> None:
        """Create a new reference pointing at the given commit."""
        response: Response[GitRef] = await self.client.rest.git.async_create_ref(
            owner=self.owner,
            repo=self.repo_name,
            ref=ref,
            sha=sha,
        )
        logger.info("Created reference", ref=ref, sha=sha, status_code=response.status_code)

    # Pull Request operations
    @raise_unexpected_hosting_error
    async def list_pull_requests(self, per_page: int = PULL_REQUEST_PAGE_SIZE) -> list[PullRequestRecord]:
        """List all open pull requests for a repository, handling pagination."""
        all_pull_requests: list[PullRequestRecord] = []
        page: int = 1
        while True:
            response: Response[list[PullRequestSimple]] = await self.client.rest.pulls.async_list(
                owner=self.owner,
                repo=self.repo_name,
                state="open",
                per_page=per_page,
                page=page,
            )
            pull_requests: list[PullRequestSimple] = response.parsed_data
            if not pull_requests:
                break
            all_pull_requests.extend(PullRequestRecord.from_github(pr) for pr in pull_requests)
            if len(pull_requests) < per_page:
                break
            page += 1
        logger.debug("Listed open pull requests", count=len(all_pull_requests), pages=page)
        return all_pull_requests

    @raise_unexpected_hosting_error
    async def create_pull_request(
        self,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
        draft: bool = False,
    ) -> PullRequestRecord:
        """Create a pull request for a repository."""
        params = self._omit_null_parameters(
            title=title,
            head=head,
            base=base,
            body=body,
            draft=draft,
        )
        response: Response[PullRequest] = await self.client.rest.pulls.async_create(
            owner=self.owner,
            repo=self.repo_name,
            **params,
        )
        return PullRequestRecord.from_github(response.parsed_data)
