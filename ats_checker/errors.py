"""Exception taxonomy shared by the pipeline, tools, web and CLI layers.

Format issues and missing keywords are analysis *results*, never exceptions.
"""

from __future__ import annotations


class ATSCheckerError(Exception):
    """Base class for all errors raised by ats_checker."""


class InvalidRequest(ATSCheckerError):
    """A required request field is missing or blank."""

    def __init__(self, field: str, message: str = "") -> None:
        super().__init__(message or f"'{field}' is required and must not be empty")
        self.field = field


class UnsupportedFormat(ATSCheckerError):
    """The declared document extension cannot be decoded."""

    def __init__(self, extension: str, supported: tuple = ()) -> None:
        shown = extension or "<none>"
        message = f"Unsupported file format: {shown}"
        if supported:
            message += f". Supported: {', '.join(supported)}"
        super().__init__(message)
        self.extension = extension
        self.supported = supported


class DecodeError(ATSCheckerError):
    """The document could not be turned into text (corrupt, scanned, empty)."""
