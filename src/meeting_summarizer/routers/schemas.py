"""
Pydantic request models for the API.

Required fields are declared optional so that missing values reach the
core's own validation and produce a 400 rather than a 422.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class SummarizeRequest(BaseModel):
    transcript: Optional[str] = Field(None, description="Meeting transcript text")
    customPrompt: Optional[str] = Field(
        None, description="Optional instruction that reframes the summary"
    )


class ShareRequestBody(BaseModel):
    recipients: Optional[List[str]] = Field(None, description="Recipient email addresses")
    subject: Optional[str] = Field(None, description="Subject line (default: Meeting Summary)")
    summary: Optional[str] = Field(None, description="Summary text to send")
    senderName: Optional[str] = Field(
        None, description="Sender display name (default: Meeting Summarizer)"
    )
