"""
Dispatcher: renders a summary into an email and sends it to all recipients.
"""

import logging
from typing import Iterable, Optional

from meeting_summarizer.mailer import SMTPEmailService, format_html_email, format_text_email
from meeting_summarizer.errors import DispatchError, ValidationError
from meeting_summarizer.models import DispatchResult, ShareRequest

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Sends shared summaries through an injected email service.

    Trusts its recipient set as already admitted (validated and unique).
    """

    def __init__(self, email_service: SMTPEmailService):
        self.email_service = email_service

    async def share(
        self,
        recipients: Optional[Iterable[str]],
        subject: Optional[str],
        summary: Optional[str],
        sender_name: Optional[str] = None,
    ) -> DispatchResult:
        """
        Share a summary with every recipient in a single message.

        Args:
            recipients: Admitted recipient addresses
            subject: Subject line, "Meeting Summary" when blank
            summary: Summary text
            sender_name: Name on the "From" line, "Meeting Summarizer" when blank

        Returns:
            DispatchResult with the number of recipients addressed

        Raises:
            ValidationError: If recipients or summary are empty
            DispatchError: If the mail transport fails
        """
        request = ShareRequest.create(recipients, summary, subject, sender_name)
        if not request.recipients:
            raise ValidationError("recipients required")
        if not request.summary.strip():
            raise ValidationError("summary required")

        body_html = format_html_email(request.summary, request.sender_name)
        body_text = format_text_email(request.summary, request.sender_name)

        try:
            count = await self.email_service.send_email(
                to_emails=request.recipients,
                subject=request.subject,
                body_text=body_text,
                body_html=body_html,
            )
        except DispatchError:
            raise
        except Exception as e:
            logger.error(f"Error sending summary to {len(request.recipients)} recipient(s): {e}")
            raise DispatchError("Failed to share summary", details=str(e)) from e
        return DispatchResult(recipients=count)
