"""Exceptions raised by porsmo."""


class PorsmoError(Exception):
    """Base class for every error this package raises."""


class TerminalInitError(PorsmoError):
    """The terminal could not be put into the mode the counters need."""


class WrongFormatError(PorsmoError, ValueError):
    """A duration string does not follow the ``XhYmZs`` format."""

    def __init__(self, message: str = "Wrong format for time") -> None:
        super().__init__(message)