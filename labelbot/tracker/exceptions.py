"""Exceptions for the issue tracker module."""

from typing import Optional


class TrackerError(Exception):
    """Base exception for all issue tracker errors."""

    pass


class TrackerAuthError(TrackerError):
    """Raised when no usable tracker credentials are configured."""

    pass


class TrackerAPIError(TrackerError):
    """Raised when a tracker API call fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class IssueNotFoundError(TrackerError):
    """Raised when a repository or issue does not exist (or is not visible)."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Resource '{resource}' not found")


class RateLimitError(TrackerError):
    """Raised when GitHub API rate limits are exceeded."""

    def __init__(self, reset_at: Optional[int] = None):
        self.reset_at = reset_at
        msg = "GitHub API rate limit exceeded"
        if reset_at:
            msg += f". Resets at {reset_at} (epoch seconds)"
        super().__init__(msg)
