"""Contains results of application execution."""

from sync_branches.synchronize.models import SyncStatus


class SyncOutcome:
    """Contains the result of the sync-branches workflow."""

    def __init__(
        self,
        status: SyncStatus,
        pull_request_url: str = "",
        pull_request_number: str = "",
        created: bool = False,
        branch_created: bool = False,
        error: str | None = None,
    ) -> None:
        """Initialize the outcome with the run's status and the relevant pull request, if any."""
        self.status = status
        self.pull_request_url = pull_request_url
        self.pull_request_number = pull_request_number
        self.created = created
        self.branch_created = branch_created
        self.error = error

    @property
    def succeeded(self) -> bool:
        """Whether the run ended with a pull request in place."""
        return self.status == SyncStatus.SUCCESS
