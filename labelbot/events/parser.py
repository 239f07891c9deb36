"""Conversion of raw GitHub webhook payloads into event models."""

import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import EventLoadError, EventPayloadError
from .models import (
    Comment,
    Event,
    Issue,
    IssueCommentEvent,
    Label,
    Repository,
    UnsupportedEvent,
    User,
)

logger = logging.getLogger(__name__)

ISSUE_COMMENT_EVENT = "issue_comment"


def _require(payload: dict[str, Any], path: str, event_name: str) -> Any:
    """Walk a dotted path through the payload, failing on missing keys."""
    value: Any = payload
    for key in path.split("."):
        if not isinstance(value, dict) or value.get(key) is None:
            raise EventPayloadError(event_name, path)
        value = value[key]
    return value


def _parse_labels(raw_labels: list[Any]) -> list[Label]:
    """Build a label list with unique names, keeping first-seen order."""
    labels: list[Label] = []
    seen: set[str] = set()
    for raw in raw_labels or []:
        name = raw.get("name") if isinstance(raw, dict) else raw
        if not name or name in seen:
            continue
        seen.add(name)
        labels.append(Label(name=str(name)))
    return labels


def _parse_issue_comment(payload: dict[str, Any]) -> IssueCommentEvent:
    name = ISSUE_COMMENT_EVENT
    repository = Repository(full_name=_require(payload, "repository.full_name", name))
    issue = Issue(
        number=int(_require(payload, "issue.number", name)),
        repository=repository,
        labels=_parse_labels(payload["issue"].get("labels", [])),
        title=payload["issue"].get("title") or "",
    )
    comment = Comment(
        id=int(_require(payload, "comment.id", name)),
        body=payload["comment"].get("body") or "",
        html_url=payload["comment"].get("html_url") or "",
        user=User(login=_require(payload, "comment.user.login", name)),
    )
    return IssueCommentEvent(
        name=name,
        action=payload.get("action") or "",
        issue=issue,
        comment=comment,
    )


def parse_event(event_name: str, payload: dict[str, Any]) -> Event:
    """Build an event model from a webhook delivery.

    Args:
        event_name: Value of the X-GitHub-Event header (or GITHUB_EVENT_NAME).
        payload: Decoded JSON body of the delivery.

    Returns:
        IssueCommentEvent for issue comments, UnsupportedEvent otherwise.

    Raises:
        EventPayloadError: If an issue comment payload lacks required fields.
    """
    if event_name == ISSUE_COMMENT_EVENT:
        return _parse_issue_comment(payload)
    logger.debug("Received unsupported event '%s'", event_name)
    return UnsupportedEvent(name=event_name, action=payload.get("action") or "")


def load_event(event_name: str, path: str | Path) -> Event:
    """Read a webhook payload JSON file and parse it.

    Raises:
        EventLoadError: If the file cannot be read or is not valid JSON.
        EventPayloadError: If the payload lacks required fields.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as e:
        raise EventLoadError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise EventLoadError(str(path), f"invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise EventLoadError(str(path), "payload is not a JSON object")
    return parse_event(event_name, payload)
