"""Errors raised while inspecting a path."""


class InspectError(Exception):
    """Base class for inspection failures.

    Attributes:
        path: The path being inspected.
        reason: Underlying OS error text, if any.
    """

    step = "inspect"

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Failed to {self.step} '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class Inaccessible(InspectError):
    """Metadata for the path could not be read."""
    step = "get metadata for"


class ClockUnavailable(InspectError):
    """The platform did not supply a usable modification time."""
    step = "get last modified time for"


class UnresolvableName(InspectError):
    """The path has no final component."""
    step = "resolve a file name from"
