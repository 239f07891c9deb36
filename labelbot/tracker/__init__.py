"""Issue tracker access.

Public API:
    IssueTracker: Interface for the tracker operations the bot needs.
    GitHubClient: PyGithub-backed implementation.
    TrackerError: Base exception for module errors.
    TrackerAuthError: Raised when credentials are missing.
    TrackerAPIError: Raised when an API call fails.
    IssueNotFoundError: Raised for missing repositories or issues.
    RateLimitError: Raised when the API rate limit is exceeded.
"""

from .client import GitHubClient
from .exceptions import (
    IssueNotFoundError,
    RateLimitError,
    TrackerAPIError,
    TrackerAuthError,
    TrackerError,
)
from .tracker import IssueTracker

__all__ = [
    "IssueTracker",
    "GitHubClient",
    "TrackerError",
    "TrackerAuthError",
    "TrackerAPIError",
    "IssueNotFoundError",
    "RateLimitError",
]
