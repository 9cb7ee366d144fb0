"""
Application factory for the Meeting Summarizer service.

Builds the LLM client and email service once from settings and injects them
into the Summarizer and Dispatcher held on ``app.state``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from meeting_summarizer import __version__
from meeting_summarizer.config import AppSettings, load_settings
from meeting_summarizer.dispatcher import Dispatcher
from meeting_summarizer.llm_client import OpenAILLMClient
from meeting_summarizer.mailer import SMTPEmailService
from meeting_summarizer.middleware import setup_middleware
from meeting_summarizer.routers.api_router import router as api_router
from meeting_summarizer.summarizer import Summarizer
from meeting_summarizer.utils.logging_utils import safe_log_config

logger = logging.getLogger(__name__)


def build_summarizer(settings: AppSettings) -> Optional[Summarizer]:
    """Create the Summarizer, or None when the LLM is not configured."""
    try:
        return Summarizer(OpenAILLMClient.from_settings(settings.llm))
    except ValueError as e:
        logger.warning(f"⚠️  Summarization disabled: {e}")
        return None


def build_dispatcher(settings: AppSettings) -> Optional[Dispatcher]:
    """Create the Dispatcher, or None when SMTP is not configured."""
    try:
        return Dispatcher(SMTPEmailService(settings.smtp))
    except ValueError as e:
        logger.warning(f"⚠️  Email sharing disabled: {e}")
        return None


def create_app(
    settings: Optional[AppSettings] = None,
    summarizer: Optional[Summarizer] = None,
    dispatcher: Optional[Dispatcher] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings (loaded from env/config when None)
        summarizer: Pre-built Summarizer, built from settings when None
        dispatcher: Pre-built Dispatcher, built from settings when None

    Returns:
        Configured FastAPI application
    """
    settings = settings or load_settings()
    logger.info(safe_log_config(settings.to_dict(), "Settings"))

    app = FastAPI(
        title="Meeting Summarizer",
        version=__version__,
        description="Summarize meeting transcripts and share them by email",
    )
    app.state.settings = settings
    app.state.summarizer = summarizer if summarizer is not None else build_summarizer(settings)
    app.state.dispatcher = dispatcher if dispatcher is not None else build_dispatcher(settings)

    setup_middleware(app, settings.server.max_body_bytes)
    app.include_router(api_router)

    logger.info("Application created")
    return app
