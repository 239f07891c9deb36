"""Exceptions for the label command parser."""


class CommandError(Exception):
    """Base exception for command parsing errors."""

    pass


class CommandParseError(CommandError):
    """Raised when a label command addressed to the bot is malformed."""

    def __init__(self, message: str, line: str = ""):
        self.message = message
        self.line = line
        super().__init__(message)
