"""Exceptions surfaced to the views."""
from __future__ import annotations


class HireAIError(Exception):
    """Base class; the message is safe to show to the user."""


class GenerationError(HireAIError):
    """The language-model call failed or was rejected by the service."""


class FormatParseError(HireAIError):
    """The service answered, but not with the structured shape we asked for."""

    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw


class ValidationError(HireAIError):
    """A form is missing a field an AI action needs; no request was made."""
