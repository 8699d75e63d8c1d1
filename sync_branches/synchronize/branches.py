"""Contains logic for ensuring the sync branch exists."""

import structlog

from sync_branches.github.abc import SyncHostingClientBase
from sync_branches.github.models import BranchLookupOutcome

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def ensure_branch(hosting: SyncHostingClientBase, branch_name: str, commit_sha: str) -> bool:
    """Ensure a branch exists, creating it from the given commit if it is missing.

    Returns True if the branch was created by this call. Errors other than a
    missing branch are raised by the client and propagate unchanged.
    """
    if not branch_name:
        raise ValueError("Branch name must not be empty")

    outcome = await hosting.fetch_branch(branch_name)
    if outcome == BranchLookupOutcome.FOUND:
        logger.info("Branch already exists", branch=branch_name)
        return False

    logger.info("Branch does not exist, creating it", branch=branch_name, sha=commit_sha)
    await hosting.create_ref(ref=f"refs/heads/{branch_name}", sha=commit_sha)
    return True
