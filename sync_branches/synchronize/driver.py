"""Orchestrates the synchronization of a source branch into a target branch."""

import time

import structlog
from structlog.contextvars import bound_contextvars

from sync_branches.configuration.models import RepositoryContext, SyncRequest
from sync_branches.github.abc import SyncHostingClientBase
from sync_branches.notifications.abc import NotifierBase
from sync_branches.synchronize.branches import ensure_branch
from sync_branches.synchronize.models import SyncStatus
from sync_branches.synchronize.pull_requests import reconcile_pull_request
from sync_branches.synchronize.results import SyncOutcome

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def notify_best_effort(
    notifier: NotifierBase, repo_name: str, source: str, target: str, pull_request_url: str, status: SyncStatus
) -> bool:
    """Send a notification, logging instead of raising if the notifier fails."""
    try:
        return await notifier.notify(repo_name, source, target, pull_request_url, status)
    except Exception as exc:
        logger.warning("Notifier raised, ignoring", status=status.value, error=str(exc), error_type=type(exc).__name__)
        return False


async def run_sync_workflow(
    request: SyncRequest,
    context: RepositoryContext,
    hosting: SyncHostingClientBase,
    notifier: NotifierBase,
) -> SyncOutcome:
    """Run the sync-branches workflow: ensure the sync branch and its pull request exist, then notify.

    Failures from GitHub never raise out of this function; they are reported
    through the failure notification and a failed SyncOutcome carrying the
    error message.
    """
    short_source = request.short_source_name
    sync_branch = context.sync_branch_name(request)

    with bound_contextvars(repo=context.full_name, source=short_source, target=request.target_ref, sync_branch=sync_branch):
        logger.info("Making a pull request for target from source", source_ref=request.source_ref)
        start_time = time.time()
        try:
            branch_created = await ensure_branch(hosting, sync_branch, context.commit_sha)
            pull_request, created = await reconcile_pull_request(hosting, sync_branch, request.target_ref, short_source)
        except Exception as exc:
            logger.error("Failed to synchronize branches", error=str(exc), error_type=type(exc).__name__)
            await notify_best_effort(notifier, context.repo_name, short_source, request.target_ref, "", SyncStatus.FAILURE)
            return SyncOutcome(status=SyncStatus.FAILURE, error=str(exc))

        logger.info(
            "Synchronized branches",
            number=pull_request.number,
            url=pull_request.html_url,
            created=created,
            branch_created=branch_created,
            duration=round(time.time() - start_time, 2),
        )
        await notify_best_effort(notifier, context.repo_name, short_source, request.target_ref, pull_request.html_url, SyncStatus.SUCCESS)
        return SyncOutcome(
            status=SyncStatus.SUCCESS,
            pull_request_url=pull_request.html_url,
            pull_request_number=str(pull_request.number),
            created=created,
            branch_created=branch_created,
        )
