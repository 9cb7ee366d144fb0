"""Email rendering and SMTP delivery for shared summaries."""

from .email_service import SMTPEmailService
from .templates import format_html_email, format_text_email

__all__ = ["SMTPEmailService", "format_html_email", "format_text_email"]
