"""Unit tests for email templates."""

from meeting_summarizer.mailer.templates import (
    FOOTER_TEXT,
    format_html_email,
    format_text_email,
)


class TestHtmlTemplate:

    def test_contains_sender_summary_and_footer(self):
        body = format_html_email("Ship v2 Friday", "Alice")

        assert "<h2>Meeting Summary</h2>" in body
        assert "<strong>From:</strong> Alice" in body
        assert '<div style="white-space: pre-wrap;">Ship v2 Friday</div>' in body
        assert FOOTER_TEXT in body

    def test_summary_whitespace_preserved(self):
        summary = "Decisions:\n  - ship v2\n\n  - hire"
        body = format_html_email(summary, "Alice")

        assert summary in body

    def test_markup_escaped(self):
        body = format_html_email("<script>alert(1)</script>", "<b>Eve</b>")

        assert "<script>" not in body
        assert "&lt;script&gt;" in body
        assert "&lt;b&gt;Eve&lt;/b&gt;" in body


class TestTextTemplate:

    def test_plain_text_body(self):
        body = format_text_email("Ship v2 Friday", "Meeting Summarizer")

        assert "From: Meeting Summarizer" in body
        assert "Ship v2 Friday" in body
        assert FOOTER_TEXT in body
