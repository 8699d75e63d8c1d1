"""Contains unit tests for the synchronize branches module."""

import pytest

from sync_branches.github.exceptions import UnexpectedHostingError
from sync_branches.synchronize.branches import ensure_branch


@pytest.mark.asyncio
async def test_ensure_branch_creates_missing_branch(fake_hosting) -> None:
    """Test that exactly one ref is created when the branch is not found."""
    created = await ensure_branch(fake_hosting, "main-sync-feature-x-123456", "abcdef123456")

    assert created is True
    assert fake_hosting.created_refs == [("refs/heads/main-sync-feature-x-123456", "abcdef123456")]


@pytest.mark.asyncio
async def test_ensure_branch_existing_branch_is_noop(fake_hosting) -> None:
    """Test that no ref is created when the branch already exists."""
    fake_hosting.branches.add("main-sync-feature-x-123456")

    created = await ensure_branch(fake_hosting, "main-sync-feature-x-123456", "abcdef123456")

    assert created is False
    assert fake_hosting.created_refs == []


@pytest.mark.asyncio
async def test_ensure_branch_twice_creates_once(fake_hosting) -> None:
    """Test that repeated calls for the same branch create it only once."""
    assert await ensure_branch(fake_hosting, "main-sync-feature-x-123456", "abcdef123456") is True
    assert await ensure_branch(fake_hosting, "main-sync-feature-x-123456", "abcdef123456") is False
    assert len(fake_hosting.created_refs) == 1


@pytest.mark.asyncio
async def test_ensure_branch_propagates_unexpected_errors(fake_hosting) -> None:
    """Test that a non-404 failure propagates and no ref is created."""
    fake_hosting.fetch_error = UnexpectedHostingError(operation="fetch_branch", message="Server Error", status_code=500)

    with pytest.raises(UnexpectedHostingError, match="Server Error"):
        await ensure_branch(fake_hosting, "main-sync-feature-x-123456", "abcdef123456")

    assert fake_hosting.created_refs == []


@pytest.mark.asyncio
async def test_ensure_branch_rejects_empty_name(fake_hosting) -> None:
    """Test that an empty branch name is rejected before any call."""
    with pytest.raises(ValueError):
        await ensure_branch(fake_hosting, "", "abcdef123456")
    assert fake_hosting.created_refs == []
