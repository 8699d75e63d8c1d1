"""Unit tests for reporting outcomes to the GitHub Actions runner."""

from pathlib import Path

import pytest

from sync_branches.actions.outputs import escape_command_data, report_outcome, set_failed, set_output
from sync_branches.synchronize.models import SyncStatus
from sync_branches.synchronize.results import SyncOutcome


def read_outputs(output_path: Path) -> dict[str, str]:
    """Parse a GITHUB_OUTPUT file written with the delimiter syntax."""
    outputs: dict[str, str] = {}
    lines = output_path.read_text(encoding="utf-8").splitlines()
    index = 0
    while index < len(lines):
        name, delimiter = lines[index].split("<<", 1)
        value_lines: list[str] = []
        index += 1
        while lines[index] != delimiter:
            value_lines.append(lines[index])
            index += 1
        outputs[name] = "\n".join(value_lines)
        index += 1
    return outputs


def test_set_output_appends_to_output_file(tmp_path: Path) -> None:
    """Test that outputs are appended to the runner's output file."""
    output_path = tmp_path / "github_output"
    output_path.write_text("EXISTING<<ghadelimiter_x\nkept\nghadelimiter_x\n", encoding="utf-8")

    set_output("PULL_REQUEST_NUMBER", "42", output_path=output_path)

    assert read_outputs(output_path) == {"EXISTING": "kept", "PULL_REQUEST_NUMBER": "42"}


def test_set_output_without_output_file(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the fallback to the set-output workflow command."""
    set_output("PULL_REQUEST_URL", "https://github.com/octo-org/octo-repo/pull/42")

    assert capsys.readouterr().out == "::set-output name=PULL_REQUEST_URL::https://github.com/octo-org/octo-repo/pull/42\n"


def test_set_failed_escapes_message(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that multi-line failure messages stay on one workflow command line."""
    set_failed("100% broken\nsecond line")

    assert capsys.readouterr().out == "::error::100%25 broken%0Asecond line\n"


def test_escape_command_data() -> None:
    """Test escaping of workflow command data."""
    assert escape_command_data("a%b\r\nc") == "a%25b%0D%0Ac"


def test_report_success(tmp_path: Path) -> None:
    """Test that a successful outcome writes both outputs and exits zero."""
    output_path = tmp_path / "github_output"
    outcome = SyncOutcome(
        status=SyncStatus.SUCCESS,
        pull_request_url="https://github.com/octo-org/octo-repo/pull/42",
        pull_request_number="42",
    )

    assert report_outcome(outcome, output_path=output_path) == 0
    assert read_outputs(output_path) == {
        "PULL_REQUEST_URL": "https://github.com/octo-org/octo-repo/pull/42",
        "PULL_REQUEST_NUMBER": "42",
    }


def test_report_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that a failed outcome surfaces the error, writes no outputs and exits non-zero."""
    output_path = tmp_path / "github_output"
    outcome = SyncOutcome(status=SyncStatus.FAILURE, error="GitHub API call fetch_branch failed (status 500): Server Error")

    assert report_outcome(outcome, output_path=output_path) == 1
    assert not output_path.exists()
    assert capsys.readouterr().out == "::error::GitHub API call fetch_branch failed (status 500): Server Error\n"
