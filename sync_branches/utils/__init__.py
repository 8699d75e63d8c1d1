"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_GITHUB_API_URL,
    PULL_REQUEST_NUMBER_OUTPUT,
    PULL_REQUEST_URL_OUTPUT,
    SLACK_FAILURE_COLOR,
    SLACK_SUCCESS_COLOR,
)
from .helpers import generate_sync_branch_name, short_source_name

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "PULL_REQUEST_URL_OUTPUT",
    "PULL_REQUEST_NUMBER_OUTPUT",
    "SLACK_SUCCESS_COLOR",
    "SLACK_FAILURE_COLOR",
    "generate_sync_branch_name",
    "short_source_name",
]
