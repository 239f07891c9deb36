"""Webhook event models.

Public API:
    parse_event: Build an event model from a webhook payload.
    load_event: Read and parse a webhook payload file.
    Event, IssueCommentEvent, UnsupportedEvent: Event kinds.
    Issue, Comment, Label, User, Repository: Payload entities.
    EventError: Base exception for module errors.
    EventPayloadError: Raised on payloads missing required fields.
    EventLoadError: Raised when a payload file cannot be read.
"""

from .exceptions import EventError, EventLoadError, EventPayloadError
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
from .parser import load_event, parse_event

__all__ = [
    "parse_event",
    "load_event",
    "Event",
    "IssueCommentEvent",
    "UnsupportedEvent",
    "Issue",
    "Comment",
    "Label",
    "User",
    "Repository",
    "EventError",
    "EventPayloadError",
    "EventLoadError",
]
