"""OpenAI client factory with optional LangFuse tracing.

Single place where AsyncOpenAI clients are created, so LangFuse detection
lives in one module.
"""

import logging
import os
from functools import lru_cache
from typing import Optional

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def is_langfuse_enabled() -> bool:
    """Check if LangFuse is properly configured (cached)."""
    return bool(
        os.getenv("LANGFUSE_PUBLIC_KEY")
        and os.getenv("LANGFUSE_SECRET_KEY")
        and os.getenv("LANGFUSE_HOST")
    )


def create_openai_client(api_key: str, base_url: str, timeout: Optional[float] = None):
    """Create an AsyncOpenAI client with optional LangFuse tracing.

    Args:
        api_key: OpenAI API key
        base_url: OpenAI API base URL
        timeout: Request timeout in seconds

    Returns:
        AsyncOpenAI client instance (with or without LangFuse wrapping)
    """
    if is_langfuse_enabled():
        import langfuse.openai as openai_module

        logger.debug("Creating OpenAI client with LangFuse tracing")
    else:
        import openai as openai_module

        logger.debug("Creating OpenAI client without tracing")

    # The summarizer owns the no-retry policy, so the SDK's own retries are off
    return openai_module.AsyncOpenAI(
        api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0
    )
