"""
Contact inquiry delivery over SMTP.

Sends each inquiry to the archive inbox (Reply-To set to the sender)
followed by an acknowledgement to the sender. Only the inbox delivery
is required to succeed.
"""

import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, formatdate, make_msgid

from heritage_archive.config import ArchiveSettings
from heritage_archive.contact import templates
from heritage_archive.contact.models import ContactInquiry
from heritage_archive.core.exceptions import ContactDeliveryError

logger = logging.getLogger(__name__)


class ContactMailer:
    """Delivers contact inquiries via SMTP."""

    def __init__(self, settings: ArchiveSettings):
        self._settings = settings

    def _template_vars(self, inquiry: ContactInquiry) -> dict[str, str]:
        return {
            "name": inquiry.name,
            "email": inquiry.email,
            "subject": inquiry.subject,
            "message": inquiry.message,
            "signature": templates.ARCHIVE_SIGNATURE,
            "tagline": templates.ARCHIVE_TAGLINE,
        }

    def _build_message(
        self,
        *,
        to_address: str,
        subject: str,
        text_body: str,
        html_body: str,
        reply_to: str | None = None,
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = formataddr(
            (self._settings.contact_from_name, self._settings.contact_from_address)
        )
        msg["To"] = to_address
        msg["Subject"] = subject
        msg["Date"] = formatdate(localtime=True)
        msg["Message-ID"] = make_msgid(domain=self._settings.contact_from_address.split("@")[-1])
        if reply_to:
            msg["Reply-To"] = reply_to

        msg.set_content(text_body)
        msg.add_alternative(html_body, subtype="html")
        return msg

    def build_inquiry(self, inquiry: ContactInquiry) -> EmailMessage:
        """Message delivered to the archive inbox."""
        variables = self._template_vars(inquiry)
        return self._build_message(
            to_address=self._settings.contact_inbox,
            subject=templates.render(templates.INQUIRY_SUBJECT, variables),
            text_body=templates.render(templates.INQUIRY_TEXT, variables),
            html_body=templates.render(templates.INQUIRY_HTML, variables, as_html=True),
            reply_to=inquiry.email,
        )

    def build_auto_reply(self, inquiry: ContactInquiry) -> EmailMessage:
        """Acknowledgement delivered to the sender."""
        variables = self._template_vars(inquiry)
        return self._build_message(
            to_address=inquiry.email,
            subject=templates.AUTO_REPLY_SUBJECT,
            text_body=templates.render(templates.AUTO_REPLY_TEXT, variables),
            html_body=templates.render(templates.AUTO_REPLY_HTML, variables, as_html=True),
        )

    def _send(self, message: EmailMessage) -> None:
        smtp = self._settings.smtp
        with smtplib.SMTP(smtp.host, smtp.port, timeout=smtp.timeout_seconds) as connection:
            if smtp.use_tls:
                connection.starttls()
            if smtp.username and smtp.password:
                connection.login(smtp.username, smtp.password)
            connection.send_message(message)

    def send(self, inquiry: ContactInquiry) -> str:
        """
        Deliver an inquiry and acknowledge it.

        Returns:
            Message-ID of the inbox message

        Raises:
            ContactDeliveryError: If the inbox message could not be sent
        """
        message = self.build_inquiry(inquiry)
        try:
            self._send(message)
        except smtplib.SMTPAuthenticationError as e:
            logger.error(f"SMTP authentication failed: {e}")
            raise ContactDeliveryError(reason="authentication") from e
        except smtplib.SMTPRecipientsRefused as e:
            logger.error(f"Recipients refused: {e}")
            raise ContactDeliveryError(reason="recipients_refused") from e
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Email sending failed: {e}")
            raise ContactDeliveryError(reason="smtp_error") from e

        logger.info(f"Contact inquiry from {inquiry.email} delivered to inbox")

        try:
            self._send(self.build_auto_reply(inquiry))
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"Auto-reply to {inquiry.email} failed: {e}")

        return message["Message-ID"]
