"""
Request and result values for the summarization and dispatch pipeline.

All values are frozen and created per call.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_SUBJECT = "Meeting Summary"
DEFAULT_SENDER_NAME = "Meeting Summarizer"


@dataclass(frozen=True)
class SummaryRequest:
    transcript: str
    custom_instruction: Optional[str] = None


@dataclass(frozen=True)
class SummaryResult:
    summary: str
    # Custom instruction used, or "Default summary"
    original_prompt: str


@dataclass(frozen=True)
class ShareRequest:
    """A single-use dispatch of one summary to an admitted recipient set."""

    recipients: Tuple[str, ...]
    summary: str
    subject: str = DEFAULT_SUBJECT
    sender_name: str = DEFAULT_SENDER_NAME

    @classmethod
    def create(
        cls,
        recipients,
        summary: str,
        subject: Optional[str] = None,
        sender_name: Optional[str] = None,
    ) -> "ShareRequest":
        """Build a request, replacing blank subject/sender with the defaults."""
        subject = _single_line(subject)
        sender_name = _single_line(sender_name)
        return cls(
            recipients=tuple(recipients or ()),
            summary=summary or "",
            subject=subject if subject.strip() else DEFAULT_SUBJECT,
            sender_name=sender_name if sender_name.strip() else DEFAULT_SENDER_NAME,
        )


def _single_line(value: Optional[str]) -> str:
    # Line breaks are not allowed in header values
    return " ".join((value or "").splitlines())


@dataclass(frozen=True)
class DispatchResult:
    recipients: int
    message: str = "Summary shared successfully"
