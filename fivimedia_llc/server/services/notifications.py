"""
Outbound email notifications.

Mail goes through Postmark. When ``POSTMARK_SERVER_TOKEN`` is not set the
notifier only logs what it would have sent. The Postmark client is
synchronous, so sends run in a worker thread.
"""

from __future__ import annotations

import asyncio
from functools import lru_cache
from html import escape
from typing import Optional

from postmarker.core import PostmarkClient

from fivimedia_llc.core.database.entities.leads import ContactSubmission
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.server.core.config import MailConfig, settings

logger = get_logger(__name__)


class EmailNotifier:
    """Sends notification emails for new leads."""

    def __init__(self, config: Optional[MailConfig] = None) -> None:
        self.config = config or settings.mail
        if self.config.postmark_token:
            self.client: Optional[PostmarkClient] = PostmarkClient(server_token=self.config.postmark_token)
            logger.info("Postmark email client initialized")
        else:
            self.client = None
            logger.warning("POSTMARK_SERVER_TOKEN not set - emails will be logged but not sent")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    async def send_contact_notification(self, lead: ContactSubmission) -> bool:
        """
        Notify the support mailbox about a contact form submission.

        Returns:
            True if the email was handed to Postmark, False otherwise
        """
        subject = f"New Contact Form Submission from {lead.name}"
        text_body = f"Name: {lead.name}\nEmail: {lead.email}\n\nMessage:\n{lead.message}\n"
        html_body = (
            "<h2>New Contact Form Submission</h2>"
            f"<p><strong>Name:</strong> {escape(lead.name)}</p>"
            f"<p><strong>Email:</strong> {escape(lead.email)}</p>"
            "<p><strong>Message:</strong></p>"
            f"<p>{escape(lead.message).replace(chr(10), '<br>')}</p>"
        )

        if self.client is None:
            logger.info(f"Mail disabled, contact notification not sent: subject={subject!r}")
            return False

        try:
            await asyncio.to_thread(
                self.client.emails.send,
                From=self.config.sender,
                To=self.config.contact_recipient,
                ReplyTo=lead.email,
                Subject=subject,
                TextBody=text_body,
                HtmlBody=html_body,
            )
        except Exception as e:
            logger.error(f"Failed to send contact notification for lead {lead.id}: {e}", exc_info=True)
            return False

        logger.info(f"Contact notification sent for lead {lead.id}")
        return True


@lru_cache(maxsize=1)
def get_email_notifier() -> EmailNotifier:
    """FastAPI dependency providing the email notifier."""
    return EmailNotifier()
