"""Fixtures for unit tests."""

from typing import Any, Generator

import pytest
import structlog

from sync_branches.configuration.models import RepositoryContext, SyncRequest
from sync_branches.github.abc import SyncHostingClientBase
from sync_branches.github.models import BranchLookupOutcome, PullRequestRecord
from sync_branches.notifications.abc import NotifierBase
from sync_branches.synchronize.models import SyncStatus


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


class FakeHostingClient(SyncHostingClientBase):
    """In-memory stand-in for the GitHub repository being synchronized."""

    def __init__(self) -> None:
        """Start with no branches, no pull requests and no injected failures."""
        self.branches: set[str] = set()
        self.pull_requests: list[PullRequestRecord] = []
        self.fetch_error: Exception | None = None
        self.list_error: Exception | None = None
        self.created_refs: list[tuple[str, str]] = []
        self.created_pull_requests: list[dict[str, Any]] = []

    async def fetch_branch(self, branch_name: str) -> BranchLookupOutcome:
        if self.fetch_error is not None:
            raise self.fetch_error
        return BranchLookupOutcome.FOUND if branch_name in self.branches else BranchLookupOutcome.NOT_FOUND

    async def create_ref(self, ref: str, sha: str) -> None:
        self.created_refs.append((ref, sha))
        self.branches.add(ref.removeprefix("refs/heads/"))

    async def list_pull_requests(self) -> list[PullRequestRecord]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.pull_requests)

    async def create_pull_request(
        self,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
        draft: bool = False,
    ) -> PullRequestRecord:
        self.created_pull_requests.append({"title": title, "head": head, "base": base, "body": body, "draft": draft})
        number = 41 + len(self.created_pull_requests)
        record = PullRequestRecord(
            number=number,
            html_url=f"https://github.com/octo-org/octo-repo/pull/{number}",
            head_ref=head,
            base_ref=base,
        )
        self.pull_requests.append(record)
        return record


class RecordingNotifier(NotifierBase):
    """Notifier that records every message instead of sending it."""

    def __init__(self) -> None:
        """Start with no recorded notifications."""
        self.calls: list[dict[str, Any]] = []

    async def notify(self, repo_name: str, source: str, target: str, pull_request_url: str, status: SyncStatus) -> bool:
        self.calls.append({"repo_name": repo_name, "source": source, "target": target, "pull_request_url": pull_request_url, "status": status})
        return True


@pytest.fixture
def fake_hosting() -> FakeHostingClient:
    """An empty in-memory repository."""
    return FakeHostingClient()


@pytest.fixture
def recording_notifier() -> RecordingNotifier:
    """A notifier that records calls."""
    return RecordingNotifier()


@pytest.fixture
def sync_request() -> SyncRequest:
    """A request to sync refs/heads/feature-x into main."""
    return SyncRequest(source_ref="refs/heads/feature-x", target_ref="main", credential="ghs_test-token")


@pytest.fixture
def repository_context() -> RepositoryContext:
    """The octo-org/octo-repo repository at commit abcdef123456."""
    return RepositoryContext(owner_login="octo-org", repo_name="octo-repo", commit_sha="abcdef123456")
