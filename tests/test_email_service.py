"""
Unit tests for the SMTP Email Service.

Tests service initialization, configuration validation, and sending.
"""
import smtplib
from dataclasses import replace
from unittest.mock import patch

import pytest

from meeting_summarizer.errors import DispatchError
from meeting_summarizer.mailer import SMTPEmailService


class TestSMTPEmailService:
    """Test SMTP Email Service."""

    def test_initialization_with_valid_config(self, smtp_settings):
        """Test that service initializes with valid configuration."""
        service = SMTPEmailService(smtp_settings)

        assert service.host == 'smtp.gmail.com'
        assert service.port == 587
        assert service.username == 'sender@example.com'
        assert service.use_tls is True
        assert service.from_email == 'sender@example.com'

    @pytest.mark.parametrize("field", ["host", "username", "password"])
    def test_initialization_with_missing_required_fields(self, smtp_settings, field):
        """Test that service raises ValueError with incomplete config."""
        with pytest.raises(ValueError, match="SMTP configuration incomplete"):
            SMTPEmailService(replace(smtp_settings, **{field: None}))

    def test_from_email_defaults_to_username(self, smtp_settings):
        service = SMTPEmailService(replace(smtp_settings, from_email=None))

        assert service.from_email == 'sender@example.com'

    def test_build_message_addresses_all_recipients(self, smtp_settings):
        service = SMTPEmailService(smtp_settings)

        msg = service.build_message(
            ['bob@x.com', 'carol@y.com'], 'Meeting Summary', 'text', '<p>html</p>'
        )

        assert msg['To'] == 'bob@x.com, carol@y.com'
        assert msg['Subject'] == 'Meeting Summary'
        assert msg['From'] == 'sender@example.com'
        assert msg.is_multipart()
        assert [part.get_content_type() for part in msg.get_payload()] == [
            'text/plain', 'text/html'
        ]

    @pytest.mark.asyncio
    async def test_send_email_single_message(self, smtp_settings):
        """One SMTP message goes to the whole recipient set."""
        service = SMTPEmailService(smtp_settings)

        with patch.object(service, '_send_smtp') as mock_send:
            count = await service.send_email(
                to_emails=['bob@x.com', 'carol@y.com'],
                subject='Test Subject',
                body_text='Plain text version',
                body_html='<h1>HTML version</h1>',
            )

        assert count == 2
        mock_send.assert_called_once()
        msg, to_addrs = mock_send.call_args[0]
        assert to_addrs == ['bob@x.com', 'carol@y.com']
        assert msg['Subject'] == 'Test Subject'

    @pytest.mark.asyncio
    async def test_send_email_failure_raises_dispatch_error(self, smtp_settings):
        """Transport failures are surfaced, not swallowed."""
        service = SMTPEmailService(smtp_settings)

        with patch.object(
            service, '_send_smtp',
            side_effect=smtplib.SMTPAuthenticationError(535, b'Bad credentials')
        ):
            with pytest.raises(DispatchError) as exc_info:
                await service.send_email(
                    to_emails=['bob@x.com'],
                    subject='Test Subject',
                    body_text='This should fail',
                )

        assert 'Bad credentials' in exc_info.value.details

    def test_send_smtp_uses_starttls_and_login(self, smtp_settings):
        service = SMTPEmailService(smtp_settings)
        msg = service.build_message(['bob@x.com'], 'S', 'text')

        with patch('meeting_summarizer.mailer.email_service.smtplib.SMTP') as mock_smtp:
            server = mock_smtp.return_value
            server.send_message.return_value = {}

            service._send_smtp(msg, ['bob@x.com'])

        mock_smtp.assert_called_once_with('smtp.gmail.com', 587, timeout=30.0)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with('sender@example.com', 'app_password')
        server.send_message.assert_called_once_with(
            msg, from_addr='sender@example.com', to_addrs=['bob@x.com']
        )
        server.quit.assert_called_once()

    def test_send_smtp_without_tls(self, smtp_settings):
        service = SMTPEmailService(replace(smtp_settings, use_tls=False, port=25))
        msg = service.build_message(['bob@x.com'], 'S', 'text')

        with patch('meeting_summarizer.mailer.email_service.smtplib.SMTP') as mock_smtp:
            server = mock_smtp.return_value
            server.send_message.return_value = {}

            service._send_smtp(msg, ['bob@x.com'])

        server.starttls.assert_not_called()

    def test_partially_refused_recipients_fail_whole_send(self, smtp_settings):
        service = SMTPEmailService(smtp_settings)
        msg = service.build_message(['bob@x.com', 'bad@x.com'], 'S', 'text')

        with patch('meeting_summarizer.mailer.email_service.smtplib.SMTP') as mock_smtp:
            server = mock_smtp.return_value
            server.send_message.return_value = {'bad@x.com': (550, b'No such user')}

            with pytest.raises(smtplib.SMTPRecipientsRefused):
                service._send_smtp(msg, ['bob@x.com', 'bad@x.com'])

        server.quit.assert_called_once()

    def test_quit_failure_does_not_mask_login_error(self, smtp_settings):
        service = SMTPEmailService(smtp_settings)
        msg = service.build_message(['bob@x.com'], 'S', 'text')

        with patch('meeting_summarizer.mailer.email_service.smtplib.SMTP') as mock_smtp:
            server = mock_smtp.return_value
            server.login.side_effect = smtplib.SMTPAuthenticationError(535, b'Bad credentials')
            server.quit.side_effect = smtplib.SMTPServerDisconnected('Connection unexpectedly closed')

            with pytest.raises(smtplib.SMTPAuthenticationError):
                service._send_smtp(msg, ['bob@x.com'])

        server.send_message.assert_not_called()
        server.close.assert_called_once()

    def test_quit_failure_after_successful_send_ignored(self, smtp_settings):
        service = SMTPEmailService(smtp_settings)
        msg = service.build_message(['bob@x.com'], 'S', 'text')

        with patch('meeting_summarizer.mailer.email_service.smtplib.SMTP') as mock_smtp:
            server = mock_smtp.return_value
            server.send_message.return_value = {}
            server.quit.side_effect = smtplib.SMTPServerDisconnected('Connection unexpectedly closed')

            service._send_smtp(msg, ['bob@x.com'])

        server.send_message.assert_called_once()
        server.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_send_email_succeeds_when_quit_fails(self, smtp_settings):
        service = SMTPEmailService(smtp_settings)

        with patch('meeting_summarizer.mailer.email_service.smtplib.SMTP') as mock_smtp:
            server = mock_smtp.return_value
            server.send_message.return_value = {}
            server.quit.side_effect = OSError('Broken pipe')

            count = await service.send_email(['bob@x.com', 'carol@y.com'], 'S', 'text')

        assert count == 2
