"""
Main API router.

Exposes the summarize, share and health endpoints under the /api prefix.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from meeting_summarizer.controllers import share_controller, summary_controller
from meeting_summarizer.dispatcher import Dispatcher
from meeting_summarizer.summarizer import Summarizer

from .schemas import ShareRequestBody, SummarizeRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def get_summarizer(request: Request) -> Optional[Summarizer]:
    return request.app.state.summarizer


def get_dispatcher(request: Request) -> Optional[Dispatcher]:
    return request.app.state.dispatcher


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "OK", "message": "Server is running"}


@router.post("/summarize")
async def summarize(
    body: SummarizeRequest,
    summarizer: Optional[Summarizer] = Depends(get_summarizer),
):
    """Generate an AI summary of a meeting transcript."""
    return await summary_controller.summarize_transcript(
        summarizer, body.transcript, body.customPrompt
    )


@router.post("/share")
async def share(
    body: ShareRequestBody,
    dispatcher: Optional[Dispatcher] = Depends(get_dispatcher),
):
    """Share a summary with a list of recipients by email."""
    return await share_controller.share_summary(
        dispatcher, body.recipients, body.subject, body.summary, body.senderName
    )
