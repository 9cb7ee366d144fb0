"""
Summary controller: maps summarize calls to HTTP responses.
"""

import logging
from typing import Optional

from fastapi.responses import JSONResponse

from meeting_summarizer.errors import SummarizationError, ValidationError
from meeting_summarizer.summarizer import Summarizer
from meeting_summarizer.utils.logging_utils import mask_string

logger = logging.getLogger(__name__)


async def summarize_transcript(
    summarizer: Optional[Summarizer],
    transcript: Optional[str],
    custom_prompt: Optional[str] = None,
):
    """Generate a summary and return the API response body."""
    try:
        if summarizer is None:
            # Validation still runs before reporting the missing client
            if not transcript or not transcript.strip():
                raise ValidationError("transcript required")
            raise SummarizationError(
                "Failed to generate summary",
                details="Language model client is not configured (OPENAI_API_KEY missing)",
            )

        result = await summarizer.summarize(transcript, custom_prompt)
        return {
            "success": True,
            "summary": result.summary,
            "originalPrompt": result.original_prompt,
        }

    except ValidationError as e:
        logger.warning(f"Rejected summarize request: {e.message}")
        return JSONResponse(status_code=400, content={"error": "Transcript is required"})
    except SummarizationError as e:
        logger.error(f"Error generating summary: {mask_string(e.details)}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate summary", "details": e.details},
        )
