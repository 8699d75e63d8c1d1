"""Contains logic for reconciling the sync pull request."""

import structlog

from sync_branches.github.abc import SyncHostingClientBase
from sync_branches.github.models import PullRequestRecord
from sync_branches.utils.helpers import generate_pull_request_body, generate_pull_request_title

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def find_matching_pull_request(pull_requests: list[PullRequestRecord], head_ref: str, base_ref: str) -> PullRequestRecord | None:
    """Return the first pull request from head_ref into base_ref, if any."""
    for pr in pull_requests:
        if pr.head_ref == head_ref and pr.base_ref == base_ref:
            return pr
    return None


async def reconcile_pull_request(
    hosting: SyncHostingClientBase,
    sync_branch: str,
    target_ref: str,
    short_source: str,
) -> tuple[PullRequestRecord, bool]:
    """Ensure exactly one open pull request exists from the sync branch into the target branch.

    Returns the pull request and whether it was created by this call.
    """
    existing_pull_requests = await hosting.list_pull_requests()
    logger.debug("Fetched open pull requests", count=len(existing_pull_requests))

    existing_pull_request = find_matching_pull_request(existing_pull_requests, sync_branch, target_ref)
    if existing_pull_request is not None:
        logger.info(
            "There is already a pull request for the sync branch",
            number=existing_pull_request.number,
            head=sync_branch,
            base=target_ref,
            url=existing_pull_request.html_url,
        )
        return existing_pull_request, False

    pull_request = await hosting.create_pull_request(
        title=generate_pull_request_title(target_ref, short_source),
        head=sync_branch,
        base=target_ref,
        body=generate_pull_request_body(target_ref, short_source),
        draft=False,
    )
    logger.info(
        "Created pull request",
        number=pull_request.number,
        head=sync_branch,
        base=target_ref,
        url=pull_request.html_url,
    )
    return pull_request, True
