"""Event handlers.

Public API:
    LabelHandler: Applies ``@bot label`` commands from issue comments.
    resolve_deltas: Apply label deltas to a label set.
    ErrorReporter: Posts explanatory error comments.
    LabelUpdateResult: Outcome of handling one event.
    LabelUpdateStatus: Enum of handler outcomes.
    HandlerError: Base exception for handler failures.
    LabelCommandError: Raised for malformed label commands.
"""

from .exceptions import HandlerError, LabelCommandError
from .label import LabelHandler, log_membership_error
from .models import LabelUpdateResult, LabelUpdateStatus
from .reporter import (
    ErrorReporter,
    parse_error_message,
    unknown_labels_message,
)
from .resolver import resolve_deltas

__all__ = [
    "LabelHandler",
    "log_membership_error",
    "resolve_deltas",
    "ErrorReporter",
    "parse_error_message",
    "unknown_labels_message",
    "LabelUpdateResult",
    "LabelUpdateStatus",
    "HandlerError",
    "LabelCommandError",
]
