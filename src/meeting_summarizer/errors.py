"""
Error taxonomy for the summarization and dispatch pipeline.

- ValidationError: caller input violates a precondition (HTTP 400)
- SummarizationError: the upstream model call failed (HTTP 500)
- DispatchError: the upstream mail transport failed (HTTP 500)
"""

from typing import Optional


class MeetingSummarizerError(Exception):
    """Base class for all errors raised by the core."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else message


class ValidationError(MeetingSummarizerError):
    """Caller input violates a precondition. Never retried."""


class SummarizationError(MeetingSummarizerError):
    """The language model could not produce a summary."""


class DispatchError(MeetingSummarizerError):
    """The mail transport rejected or failed the send attempt."""
