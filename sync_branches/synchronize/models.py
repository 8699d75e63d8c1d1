"""Models shared by the synchronization workflow."""

from enum import Enum


class SyncStatus(str, Enum):
    """Terminal state of a synchronization run."""

    SUCCESS = "success"
    FAILURE = "failure"
