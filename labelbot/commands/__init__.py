"""Label command parsing.

Public API:
    CommandParser: Interface for extracting label commands from comments.
    LabelCommandParser: Default ``@bot label +A -B`` parser.
    LabelCommand: Ordered sequence of label deltas.
    LabelDelta: One add-or-remove operation.
    DeltaKind: Enum of delta kinds.
    CommandError: Base exception for module errors.
    CommandParseError: Raised on malformed label commands.
"""

from .exceptions import CommandError, CommandParseError
from .models import DeltaKind, LabelCommand, LabelDelta
from .parser import CommandParser, LabelCommandParser

__all__ = [
    "CommandParser",
    "LabelCommandParser",
    "LabelCommand",
    "LabelDelta",
    "DeltaKind",
    "CommandError",
    "CommandParseError",
]
