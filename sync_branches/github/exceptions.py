"""Errors raised by the GitHub client boundary."""


class UnexpectedHostingError(Exception):
    """Raised when a GitHub API call fails in a way the caller cannot recover from."""

    def __init__(self, operation: str, message: str, status_code: int | None = None) -> None:
        """Initializes the exception with the failed operation and the reported status."""
        detail = f"status {status_code}" if status_code is not None else "no response"
        super().__init__(f"GitHub API call {operation} failed ({detail}): {message}")
        self.operation = operation
        self.status_code = status_code
