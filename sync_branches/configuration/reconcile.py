"""Reconciles configuration between CLI arguments and environment variables."""

import structlog

from sync_branches.configuration.env import Settings
from sync_branches.configuration.event import load_workflow_event
from sync_branches.configuration.exceptions import (
    InvalidConfigurationElementError,
    RepositoryContextUndefinedError,
    RequiredConfigurationElementError,
)
from sync_branches.configuration.models import RepositoryContext, SyncRequest
from sync_branches.utils.constants import DEFAULT_GITHUB_API_URL
from sync_branches.utils.github import split_repository_in_configuration
from sync_branches.utils.helpers import short_source_name

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _clean_input(value: str | None) -> str | None:
    """Trim an input value, treating blank values as unset."""
    if value is None:
        return None
    value = value.strip()
    return value or None


async def reconcile_sync_request(
    cli_source: str | None,
    cli_target: str | None,
    cli_github_token: str | None,
    cli_webhook_url: str | None = None,
    cli_github_api_url: str | None = None,
    cli_debug: bool = False,
) -> SyncRequest:
    """Builds the SyncRequest for this run from the resolved inputs.

    Args:
        cli_source (str | None): Fully-qualified source ref (e.g. refs/heads/feature-x).
        cli_target (str | None): Target branch name.
        cli_github_token (str | None): Token used to authenticate against the GitHub API.
        cli_webhook_url (str | None): Slack incoming webhook URL; notifications are disabled if unset.
        cli_github_api_url (str | None): GitHub API URL, for GitHub Enterprise Server.
        cli_debug (bool): Whether debug logging is enabled.

    Raises:
        RequiredConfigurationElementError: If source, target or github_token is missing.
        InvalidConfigurationElementError: If the source ref does not name a branch.

    Returns:
        SyncRequest: The immutable request for this run.
    """
    source = _clean_input(cli_source)
    target = _clean_input(cli_target)
    github_token = _clean_input(cli_github_token)

    if source is None:
        raise RequiredConfigurationElementError(name="source", cli_name="--source", env_name="INPUT_SOURCE")
    if target is None:
        raise RequiredConfigurationElementError(name="target", cli_name="--target", env_name="INPUT_TARGET")
    if github_token is None:
        raise RequiredConfigurationElementError(name="github_token", cli_name="--github-token", env_name="INPUT_GITHUB_TOKEN")

    if not short_source_name(source):
        raise InvalidConfigurationElementError(name="source", value=source, reason="expected a fully-qualified ref such as refs/heads/<branch>")

    webhook_url = _clean_input(cli_webhook_url)
    if webhook_url is None:
        logger.debug("No webhook URL configured, Slack notifications are disabled")

    return SyncRequest(
        source_ref=source,
        target_ref=target,
        credential=github_token,
        webhook_url=webhook_url,
        github_api_url=_clean_input(cli_github_api_url) or DEFAULT_GITHUB_API_URL,
        debug=cli_debug,
    )


async def resolve_repository_context(settings: Settings) -> RepositoryContext:
    """Resolves the repository and commit the workflow run was triggered for.

    The event payload is preferred for the repository coordinates, with
    GITHUB_REPOSITORY as a fallback. The commit always comes from GITHUB_SHA.
    """
    commit_sha = _clean_input(settings.GITHUB_SHA)
    if commit_sha is None:
        raise RepositoryContextUndefinedError("GITHUB_SHA is not set; unable to determine the commit to sync from.")

    event = load_workflow_event(settings.GITHUB_EVENT_PATH)
    if event is not None and event.repository is not None:
        return RepositoryContext(
            owner_login=event.repository.owner.login,
            repo_name=event.repository.name,
            commit_sha=commit_sha,
        )

    repository = _clean_input(settings.GITHUB_REPOSITORY)
    if repository is None:
        raise RepositoryContextUndefinedError("Neither the event payload nor GITHUB_REPOSITORY identify the repository.")
    try:
        owner, repo_name = await split_repository_in_configuration(repo=repository)
    except ValueError as exc:
        raise RepositoryContextUndefinedError(str(exc)) from exc
    return RepositoryContext(owner_login=owner, repo_name=repo_name, commit_sha=commit_sha)
