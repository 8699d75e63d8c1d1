"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from sync_branches.actions.outputs import report_outcome, set_failed
from sync_branches.configuration.env import Settings
from sync_branches.configuration.exceptions import ConfigurationError
from sync_branches.configuration.models import RepositoryContext, SyncRequest
from sync_branches.configuration.reconcile import reconcile_sync_request, resolve_repository_context
from sync_branches.github.adapter import GitHubKitAdapter
from sync_branches.notifications.slack import SlackNotifier
from sync_branches.synchronize.driver import run_sync_workflow
from sync_branches.synchronize.results import SyncOutcome
from sync_branches.utils.log_config import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


async def run_sync(request: SyncRequest, context: RepositoryContext) -> SyncOutcome:
    """Create the GitHub and Slack clients for this run and run the workflow."""
    hosting = await GitHubKitAdapter.create(
        owner=context.owner_login,
        repo_name=context.repo_name,
        github_token=request.credential,
        github_api_url=request.github_api_url,
    )
    notifier = SlackNotifier(webhook_url=request.webhook_url)
    return await run_sync_workflow(request=request, context=context, hosting=hosting, notifier=notifier)


async def main(
    settings: Settings,
    source: str | None,
    target: str | None,
    github_token: str | None,
    webhook_url: str | None,
    github_api_url: str | None,
    debug: bool,
) -> SyncOutcome:
    """Resolve the run's configuration, then synchronize.

    Raises ConfigurationError before any network call if the configuration is unusable.
    """
    request = await reconcile_sync_request(
        cli_source=source,
        cli_target=target,
        cli_github_token=github_token,
        cli_webhook_url=webhook_url,
        cli_github_api_url=github_api_url or settings.GITHUB_API_URL,
        cli_debug=debug,
    )
    context = await resolve_repository_context(settings)
    return await run_sync(request, context)


@typer_app.command(name="sync")
def sync_cli(
    source: Annotated[str | None, Option(envvar="INPUT_SOURCE", help="Fully-qualified source ref, e.g. refs/heads/feature-x.")] = None,
    target: Annotated[str | None, Option(envvar="INPUT_TARGET", help="Target branch name.")] = None,
    github_token: Annotated[str | None, Option(envvar="INPUT_GITHUB_TOKEN", help="Token used to call the GitHub API.", show_default=False)] = None,
    webhook_url: Annotated[str | None, Option(envvar="INPUT_WEBHOOK_URL", help="Slack incoming webhook URL.", show_default=False)] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug logging.")] = False,
) -> None:
    """Ensures a sync branch and pull request exist from the source branch into the target branch."""
    settings = Settings()
    configure_logging(debug=debug or settings.debug_enabled)

    try:
        outcome = asyncio.run(
            main(
                settings=settings,
                source=source,
                target=target,
                github_token=github_token,
                webhook_url=webhook_url,
                github_api_url=github_api_url,
                debug=debug or settings.debug_enabled,
            )
        )
    except ConfigurationError as exc:
        logger.error("Invalid configuration", error=str(exc))
        set_failed(str(exc))
        sys.exit(1)

    exit_code = report_outcome(outcome, output_path=settings.GITHUB_OUTPUT)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    typer_app()
