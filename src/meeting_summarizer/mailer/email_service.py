"""
SMTP Email Service.

Sends one multipart (plain text + HTML) message to a list of recipients.
The blocking SMTP exchange runs in a worker thread.
"""
import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional, Sequence

from meeting_summarizer.config import SMTPSettings
from meeting_summarizer.errors import DispatchError

logger = logging.getLogger(__name__)


class SMTPEmailService:
    """SMTP email service for sending emails via SMTP protocol."""

    def __init__(self, settings: SMTPSettings):
        """
        Initialize SMTP email service.

        Args:
            settings: SMTP settings (host, port, credentials, TLS, sender)

        Raises:
            ValueError: If host, username, password or sender address is missing
        """
        self.host = settings.host
        self.port = settings.port
        self.username = settings.username
        self.password = settings.password
        self.use_tls = settings.use_tls
        self.from_email = settings.from_email or settings.username
        self.timeout = settings.timeout_seconds

        if not all([self.host, self.username, self.password, self.from_email]):
            raise ValueError(
                "SMTP configuration incomplete. Required: host, username, "
                "password, from_email"
            )

        logger.info(
            f"SMTP Email Service initialized: {self.username}@{self.host}:{self.port} "
            f"(TLS: {self.use_tls})"
        )

    def build_message(
        self,
        to_emails: Sequence[str],
        subject: str,
        body_text: str,
        body_html: Optional[str] = None
    ) -> MIMEMultipart:
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = self.from_email
        msg['To'] = ", ".join(to_emails)

        msg.attach(MIMEText(body_text, 'plain', 'utf-8'))
        if body_html:
            msg.attach(MIMEText(body_html, 'html', 'utf-8'))
        return msg

    async def send_email(
        self,
        to_emails: Sequence[str],
        subject: str,
        body_text: str,
        body_html: Optional[str] = None
    ) -> int:
        """
        Send one email addressed to every recipient.

        Args:
            to_emails: Recipient addresses
            subject: Email subject line
            body_text: Plain text email body
            body_html: Optional HTML email body

        Returns:
            Number of recipients the message was addressed to

        Raises:
            DispatchError: If the SMTP exchange fails or any recipient is refused
        """
        msg = self.build_message(to_emails, subject, body_text, body_html)

        try:
            await asyncio.to_thread(self._send_smtp, msg, list(to_emails))
        except Exception as e:
            logger.error(f"Failed to send email to {len(to_emails)} recipient(s): {e}")
            raise DispatchError("Failed to share summary", details=str(e)) from e

        logger.info(f"✅ Email sent to {len(to_emails)} recipient(s): {subject}")
        return len(to_emails)

    def _send_smtp(self, msg: MIMEMultipart, to_emails: list) -> None:
        """
        Internal method to send email via SMTP (blocking).

        Raises:
            smtplib.SMTPException: If sending fails or a recipient is refused
        """
        smtp_server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)

        try:
            if self.use_tls:
                # STARTTLS (port 587)
                smtp_server.ehlo()
                smtp_server.starttls()
                smtp_server.ehlo()

            smtp_server.login(self.username, self.password)
            refused = smtp_server.send_message(msg, from_addr=self.from_email, to_addrs=to_emails)
            if refused:
                # Partial acceptance is reported as a failure of the whole send
                raise smtplib.SMTPRecipientsRefused(refused)
            logger.debug(f"SMTP send completed for {len(to_emails)} recipient(s)")
        finally:
            self._close(smtp_server)

    @staticmethod
    def _close(smtp_server: smtplib.SMTP) -> None:
        """Close the session without masking the outcome of the send."""
        try:
            smtp_server.quit()
        except (smtplib.SMTPException, OSError) as e:
            logger.debug(f"SMTP quit failed, closing socket: {e}")
            smtp_server.close()
