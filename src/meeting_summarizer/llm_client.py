"""
LLM client interface for chat-completion calls.

The summarizer depends on ``LLMClient`` only; ``OpenAILLMClient`` talks to
OpenAI or any OpenAI-compatible endpoint.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from meeting_summarizer.config import LLMSettings
from meeting_summarizer.openai_factory import create_openai_client

logger = logging.getLogger(__name__)


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    def __init__(self, model: Optional[str] = None, temperature: float = 0.7, max_tokens: int = 1000):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def complete(self, messages: List[Dict[str, str]]) -> str:
        """Run one chat completion and return the first choice's text.

        Raises:
            Exception: Any upstream failure, unmodified
        """
        pass


class OpenAILLMClient(LLMClient):
    """OpenAI-compatible LLM client that works with OpenAI, Ollama, and other compatible APIs."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        timeout: Optional[float] = None,
        client=None,
    ):
        super().__init__(model, temperature, max_tokens)
        self.api_key = api_key
        self.base_url = base_url
        if not self.api_key or not self.base_url or not self.model:
            raise ValueError(
                f"LLM configuration incomplete: api_key={'set' if self.api_key else 'MISSING'}, "
                f"base_url={'set' if self.base_url else 'MISSING'}, "
                f"model={'set' if self.model else 'MISSING'}"
            )

        self.client = client or create_openai_client(
            api_key=self.api_key, base_url=self.base_url, timeout=timeout
        )
        self.logger.info(f"OpenAI client initialized, base_url: {self.base_url}, model: {self.model}")

    @classmethod
    def from_settings(cls, settings: LLMSettings, client=None) -> "OpenAILLMClient":
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            timeout=settings.timeout_seconds,
            client=client,
        )

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )

        if not response.choices:
            raise ValueError("Model response contained no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError("Model response contained no text content")
        return content
