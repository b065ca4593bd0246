"""Errors raised by the submission workflow."""


class SubmissionError(Exception):
    """Base class for submission workflow errors."""


class SubmissionValidationError(SubmissionError):
    """The payload failed validation. ``errors`` maps field name to message."""

    def __init__(self, errors: dict[str, str]):
        super().__init__("Submission failed validation")
        self.errors = errors


class PersistenceError(SubmissionError):
    """The submission could not be stored."""


class ExportError(SubmissionError):
    """A foreground spreadsheet export could not be delivered."""
