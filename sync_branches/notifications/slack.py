"""Slack incoming webhook notifications."""

from typing import Any

import httpx
import structlog

from sync_branches.notifications.abc import NotifierBase
from sync_branches.synchronize.models import SyncStatus
from sync_branches.utils.constants import (
    SLACK_FAILURE_COLOR,
    SLACK_ICON_EMOJI,
    SLACK_REQUEST_TIMEOUT,
    SLACK_SUCCESS_COLOR,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _markdown_section(text: str) -> dict[str, Any]:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def build_success_message(source: str, target: str, pull_request_url: str) -> dict[str, Any]:
    """Build the colored message announcing the sync pull request."""
    return {
        "color": SLACK_SUCCESS_COLOR,
        "blocks": [
            _markdown_section(f"{source} branch has been updated.\npull request to update {target} branch created:\n{pull_request_url}"),
        ],
    }


def build_failure_message(source: str, target: str) -> dict[str, Any]:
    """Build the colored message announcing a failed sync."""
    return {
        "color": SLACK_FAILURE_COLOR,
        "blocks": [
            _markdown_section(f"Failed to create pull request from {source} branch into {target}"),
        ],
    }


def build_payload(repo_name: str, source: str, target: str, pull_request_url: str, status: SyncStatus) -> dict[str, Any]:
    """Build the webhook payload for the given status."""
    if status == SyncStatus.SUCCESS:
        message = build_success_message(source, target, pull_request_url)
    else:
        message = build_failure_message(source, target)
    return {
        "username": f"{repo_name} {source}->{target} sync",
        "icon_emoji": SLACK_ICON_EMOJI,
        "attachments": [message],
    }


class SlackNotifier(NotifierBase):
    """Posts sync results to a Slack incoming webhook; does nothing when no webhook is configured."""

    def __init__(
        self,
        webhook_url: str | None,
        client: httpx.AsyncClient | None = None,
        timeout: float = SLACK_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the notifier, optionally with a pre-configured HTTP client."""
        self.webhook_url = webhook_url
        self.client = client
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        """Whether a webhook destination is configured."""
        return bool(self.webhook_url)

    async def _post(self, webhook_url: str, payload: dict[str, Any]) -> httpx.Response:
        if self.client is not None:
            return await self.client.post(webhook_url, json=payload)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(webhook_url, json=payload)

    async def notify(self, repo_name: str, source: str, target: str, pull_request_url: str, status: SyncStatus) -> bool:
        """Send the status message to Slack."""
        if not self.webhook_url:
            logger.debug("No webhook configured, skipping Slack notification", status=status.value)
            return False

        payload = build_payload(repo_name, source, target, pull_request_url, status)
        try:
            response = await self._post(self.webhook_url, payload)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Failed to deliver Slack notification", status=status.value, error=str(exc), error_type=type(exc).__name__)
            return False

        logger.info("Sent Slack notification", status=status.value)
        return True
