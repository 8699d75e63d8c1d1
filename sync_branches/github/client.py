"""Sets up the authenticated githubkit client."""

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

from sync_branches.utils.constants import DEFAULT_GITHUB_API_URL

GitHubClient = GitHub[TokenAuthStrategy]


async def get_github_token_client(github_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> GitHubClient:
    """Returns a GitHub client authenticated with the workflow's token.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if no token is provided.
    """
    if not github_token:
        raise RuntimeError("GitHub token authentication requires github_token.")
    # Disable HTTP caching to always get fresh data
    return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)
