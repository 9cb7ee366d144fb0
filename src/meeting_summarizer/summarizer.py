"""
Summarizer: turns a transcript into a model request and returns the reply.
"""

import logging
from typing import Optional

from meeting_summarizer.errors import SummarizationError, ValidationError
from meeting_summarizer.llm_client import LLMClient
from meeting_summarizer.models import SummaryRequest, SummaryResult
from meeting_summarizer.prompts import (
    DEFAULT_PROMPT_LABEL,
    build_messages,
    has_custom_instruction,
)
from meeting_summarizer.utils.logging_utils import mask_string

logger = logging.getLogger(__name__)


class Summarizer:
    """
    Produces meeting summaries through an injected LLM client.

    Holds no per-call state; one instance serves concurrent requests.
    """

    def __init__(self, llm_client: LLMClient):
        self.llm_client = llm_client

    async def summarize(self, transcript: Optional[str], custom_instruction: Optional[str] = None) -> SummaryResult:
        """
        Summarize a transcript.

        Args:
            transcript: Meeting transcript text
            custom_instruction: Optional instruction that reframes the summary

        Returns:
            SummaryResult with the model's text verbatim and the prompt mode used

        Raises:
            ValidationError: If the transcript is empty or whitespace
            SummarizationError: If the model call fails for any reason
        """
        if not transcript or not transcript.strip():
            raise ValidationError("transcript required")

        request = SummaryRequest(transcript=transcript, custom_instruction=custom_instruction)
        custom = has_custom_instruction(request.custom_instruction)
        messages = build_messages(request.transcript, request.custom_instruction)

        logger.info(
            f"Generating summary ({'custom' if custom else 'default'} prompt, "
            f"{len(request.transcript)} chars)"
        )
        try:
            summary = await self.llm_client.complete(messages)
        except Exception as e:
            logger.error(f"Error generating summary: {mask_string(str(e))}")
            raise SummarizationError("Failed to generate summary", details=str(e)) from e

        logger.info(f"Summary generated ({len(summary)} chars)")
        return SummaryResult(
            summary=summary,
            original_prompt=request.custom_instruction if custom else DEFAULT_PROMPT_LABEL,
        )
