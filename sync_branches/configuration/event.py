"""Models for the subset of the workflow event payload used to locate the repository."""

import json
from pathlib import Path

import pydantic
import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class RepositoryOwner(pydantic.BaseModel):
    """Owner of the repository that triggered the event."""

    model_config = pydantic.ConfigDict(extra="ignore")

    login: str


class Repository(pydantic.BaseModel):
    """Repository that triggered the event."""

    model_config = pydantic.ConfigDict(extra="ignore")

    name: str
    owner: RepositoryOwner


class WorkflowEvent(pydantic.BaseModel):
    """Workflow event payload, as written by the runner to GITHUB_EVENT_PATH."""

    model_config = pydantic.ConfigDict(extra="ignore")

    repository: Repository | None = None


def load_workflow_event(event_path: Path | None) -> WorkflowEvent | None:
    """Load the workflow event payload, returning None when no usable payload exists."""
    if event_path is None or not event_path.is_file():
        logger.debug("No workflow event payload available", event_path=str(event_path) if event_path else None)
        return None
    try:
        raw_event = json.loads(event_path.read_text(encoding="utf-8"))
        return WorkflowEvent.model_validate(raw_event)
    except (json.JSONDecodeError, pydantic.ValidationError) as exc:
        logger.warning("Ignoring unreadable workflow event payload", event_path=str(event_path), error=str(exc))
        return None
