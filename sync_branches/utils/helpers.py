"""General utility functions and helper classes."""

from sync_branches.utils.constants import SOURCE_REF_PREFIX_LENGTH, SYNC_BRANCH_SHA_SUFFIX_LENGTH


def short_source_name(source_ref: str) -> str:
    """Strip the fixed-length 'refs/heads/' prefix from a fully-qualified source ref."""
    return source_ref[SOURCE_REF_PREFIX_LENGTH:]


def generate_sync_branch_name(target_ref: str, source_ref: str, commit_sha: str) -> str:
    """Generate a deterministic branch name like 'main-sync-feature-x-123456'."""
    return f"{target_ref}-sync-{short_source_name(source_ref)}-{commit_sha[-SYNC_BRANCH_SHA_SUFFIX_LENGTH:]}"


def generate_pull_request_title(target_ref: str, short_source: str) -> str:
    """Generate the title of a sync pull request."""
    return f"sync: {target_ref} with {short_source}"


def generate_pull_request_body(target_ref: str, short_source: str) -> str:
    """Generate the body of a sync pull request."""
    return f"sync-branches: syncing {target_ref} with {short_source}"
