"""Shared fixtures for Meeting Summarizer tests."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from meeting_summarizer.config import ENV_OVERRIDES, AppSettings, SMTPSettings
from meeting_summarizer.llm_client import LLMClient
from meeting_summarizer.mailer import SMTPEmailService


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the settings loader reads."""
    for env_var in ENV_OVERRIDES.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    return monkeypatch


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def smtp_settings():
    return SMTPSettings(
        host="smtp.gmail.com",
        port=587,
        username="sender@example.com",
        password="app_password",
        use_tls=True,
        from_email="sender@example.com",
    )


@pytest.fixture
def llm_client():
    """LLM client stub whose complete() echoes a fixed summary."""
    client = Mock(spec=LLMClient)
    client.complete = AsyncMock(return_value="Team agreed to ship v2 Friday.")
    return client


@pytest.fixture
def openai_stub():
    """Stand-in for AsyncOpenAI with a mocked chat.completions.create."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion("A summary."))
    return client


@pytest.fixture
def email_service():
    """Email service stub reporting every recipient as addressed."""
    service = Mock(spec=SMTPEmailService)
    service.send_email = AsyncMock(side_effect=lambda to_emails, **kwargs: len(to_emails))
    return service
