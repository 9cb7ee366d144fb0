"""
Meeting Summarizer service.

Summarizes meeting transcripts through an OpenAI-compatible chat API and
shares the resulting summary with recipients by email.
"""

__version__ = "1.0.0"
