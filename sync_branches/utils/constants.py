"""Shared constants used across the application."""

# GitHub Constants
# ----------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Public GitHub API URL, used unless a GitHub Enterprise Server URL is configured."""

PULL_REQUEST_PAGE_SIZE = 100
"""Page size used when listing pull requests (GitHub's maximum)."""

# Sync Branch Naming Constants
# ----------------------------

SOURCE_REF_PREFIX_LENGTH = len("refs/heads/")
"""Number of characters stripped from the source ref to obtain the short branch name."""

SYNC_BRANCH_SHA_SUFFIX_LENGTH = 6
"""Number of trailing commit SHA characters embedded in the sync branch name."""

# Slack Constants
# ---------------

SLACK_SUCCESS_COLOR = "#27ae60"
"""Attachment color of the message sent when the pull request exists."""

SLACK_FAILURE_COLOR = "#C0392A"
"""Attachment color of the message sent when the sync failed."""

SLACK_ICON_EMOJI = ":github:"

SLACK_REQUEST_TIMEOUT = 10.0
"""Seconds to wait on the Slack webhook before giving up on the notification."""

# Actions Output Constants
# ------------------------

PULL_REQUEST_URL_OUTPUT = "PULL_REQUEST_URL"
PULL_REQUEST_NUMBER_OUTPUT = "PULL_REQUEST_NUMBER"
