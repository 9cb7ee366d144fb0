"""
Email templates for shared meeting summaries.

Provides HTML and plain text renderings. The layout is fixed; only the
sender name and the summary text vary.
"""
import html

FOOTER_TEXT = "This summary was generated using AI Meeting Summarizer"


def format_html_email(summary: str, sender_name: str) -> str:
    """
    Format HTML email body.

    Args:
        summary: Summary text, rendered whitespace-preserving
        sender_name: Display name shown on the "From" line

    Returns:
        HTML email body
    """
    # Escape HTML so the summary is shown literally
    summary_escaped = html.escape(summary, quote=True)
    sender_escaped = html.escape(sender_name, quote=True)

    return f"""
<h2>Meeting Summary</h2>
<p><strong>From:</strong> {sender_escaped}</p>
<hr>
<div style="white-space: pre-wrap;">{summary_escaped}</div>
<hr>
<p><em>{FOOTER_TEXT}</em></p>
"""


def format_text_email(summary: str, sender_name: str) -> str:
    """Format plain text email body."""
    return f"""MEETING SUMMARY
From: {sender_name}

───────────────────────────────────────────────────────────

{summary}

───────────────────────────────────────────────────────────

{FOOTER_TEXT}
"""
