"""Email transport for sharing summaries."""

import asyncio
import html
import logging
import re
import smtplib
from email.message import EmailMessage

from meetnotes.config import Settings
from meetnotes.domain.errors import NotificationError

logger = logging.getLogger(__name__)

DELIVERED_MESSAGE = "Email sent successfully!"
ACKNOWLEDGED_MESSAGE = "Share request received. Email delivery is disabled on this server."

_BREAK_TAGS = re.compile(r"<\s*(br|/p|/div|/li|/h[1-6])\b[^>]*>", re.IGNORECASE)
_TAGS = re.compile(r"<[^>]+>")


def html_to_text(html_body: str) -> str:
    """Plain-text rendering of an HTML body for the text/plain part."""
    text = _BREAK_TAGS.sub("\n", html_body)
    text = html.unescape(_TAGS.sub("", text))
    return re.sub(r"\n{3,}", "\n\n", text).strip()


class EmailClient:
    """Sends HTML emails over SMTP, or only logs them when delivery is off."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the email client.

        Args:
            settings: Application settings with SMTP host and credentials
        """
        self.delivery_enabled = settings.email_delivery_enabled
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.timeout = settings.smtp_timeout_seconds
        self.user = settings.email_user
        self.password = settings.email_pass
        self.sender = settings.sender_address

    def build_message(self, to: str, subject: str, html_body: str) -> EmailMessage:
        """Build a multipart message with a plain-text fallback."""
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html_to_text(html_body))
        message.add_alternative(html_body, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            smtp.starttls()
            smtp.login(self.user, self.password)
            smtp.send_message(message)

    async def send(self, to: str, subject: str, html_body: str) -> str:
        """Send an email and return a confirmation message.

        Raises:
            NotificationError: If the transport is misconfigured or the send fails
        """
        if not self.delivery_enabled:
            logger.info(f"Email delivery disabled, share to {to} acknowledged only")
            return ACKNOWLEDGED_MESSAGE

        if not self.user or not self.password:
            raise NotificationError("Email transport is not configured.")

        try:
            message = self.build_message(to, subject, html_body)
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            raise NotificationError("Failed to send email.", e) from e

        logger.info(f"Shared summary by email to {to}")
        return DELIVERED_MESSAGE
