"""Reports the outcome of a run back to the GitHub Actions runner.

Outputs are appended to the file named by GITHUB_OUTPUT using the
multi-line delimiter syntax. Failures are reported with the ``::error::``
workflow command, and the caller is expected to exit non-zero.
"""

import sys
import uuid
from pathlib import Path

import structlog

from sync_branches.synchronize.results import SyncOutcome
from sync_branches.utils.constants import PULL_REQUEST_NUMBER_OUTPUT, PULL_REQUEST_URL_OUTPUT

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def escape_command_data(value: str) -> str:
    """Escape a value for use as workflow command data."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_output(name: str, value: str, output_path: Path | None = None) -> None:
    """Set a step output.

    Falls back to the legacy ``::set-output`` command on stdout when the
    runner does not provide an output file.
    """
    if output_path is None:
        print(f"::set-output name={name}::{escape_command_data(value)}")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: output {name} contains the delimiter {delimiter}")
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    logger.debug("Set step output", name=name, value=value)


def set_failed(message: str) -> None:
    """Mark the step as failed with the given message."""
    print(f"::error::{escape_command_data(message)}")
    sys.stdout.flush()


def report_outcome(outcome: SyncOutcome, output_path: Path | None = None) -> int:
    """Write the run's outputs or failure to the runner, returning the process exit code."""
    if not outcome.succeeded:
        set_failed(outcome.error or "Failed to synchronize branches")
        return 1

    set_output(PULL_REQUEST_URL_OUTPUT, outcome.pull_request_url, output_path=output_path)
    set_output(PULL_REQUEST_NUMBER_OUTPUT, outcome.pull_request_number, output_path=output_path)
    return 0
