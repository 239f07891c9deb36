"""Exceptions for the events module."""


class EventError(Exception):
    """Base exception for webhook event errors."""

    pass


class EventPayloadError(EventError):
    """Raised when a webhook payload is missing a required field."""

    def __init__(self, event_name: str, field_path: str):
        self.event_name = event_name
        self.field_path = field_path
        super().__init__(
            f"Malformed '{event_name}' payload: missing field '{field_path}'"
        )


class EventLoadError(EventError):
    """Raised when a webhook payload file cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load event payload from '{path}': {reason}")
