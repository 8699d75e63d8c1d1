"""Base ABC for chat notifiers."""

from abc import ABC, abstractmethod

from sync_branches.synchronize.models import SyncStatus


class NotifierBase(ABC):
    """Base ABC for best-effort delivery of sync results to a chat channel."""

    @abstractmethod
    async def notify(self, repo_name: str, source: str, target: str, pull_request_url: str, status: SyncStatus) -> bool:
        """Send a status message, returning whether it was delivered.

        Implementations must not raise on delivery failures.
        """
        pass
