"""Exceptions for event handlers."""


class HandlerError(Exception):
    """Base exception for handler failures."""

    pass


class LabelCommandError(HandlerError):
    """Raised after a malformed label command has been reported to the user.

    The explanatory comment is already posted when this is raised; the
    exception exists so operators can see that a user tried and failed.
    """

    def __init__(self, repository: str, issue_number: int, reason: str):
        self.repository = repository
        self.issue_number = issue_number
        self.reason = reason
        super().__init__(
            f"Label parsing failed for issue {repository}#{issue_number}: {reason}"
        )
