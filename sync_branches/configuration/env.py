"""Pydantic Settings model for the GitHub Actions runner environment."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from sync_branches.utils.constants import DEFAULT_GITHUB_API_URL


class Settings(BaseSettings):
    """Environment variable settings provided by the Actions runner."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False
    RUNNER_DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL

    # Workflow run context
    GITHUB_REPOSITORY: str | None = None
    GITHUB_SHA: str | None = None
    GITHUB_EVENT_PATH: Path | None = None

    # Workflow command files
    GITHUB_OUTPUT: Path | None = None

    @property
    def debug_enabled(self) -> bool:
        """Whether debug logging was requested either directly or through a debug re-run."""
        return self.DEBUG or self.RUNNER_DEBUG
