"""Tests for contact inquiry validation and delivery."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from heritage_archive.config import ArchiveSettings, SMTPSettings
from heritage_archive.contact import ContactInquiry, ContactMailer, contains_spam
from heritage_archive.contact.templates import render
from heritage_archive.core.exceptions import ContactDeliveryError


def _inquiry(**overrides) -> ContactInquiry:
    data = {
        "name": "Ama Mensah",
        "email": "ama@example.com",
        "subject": "Loan request",
        "message": "We would like to borrow the hammock scan for an exhibition.",
    }
    data.update(overrides)
    return ContactInquiry(**data)


@pytest.fixture
def mail_settings() -> ArchiveSettings:
    return ArchiveSettings(
        smtp=SMTPSettings(host="smtp.test", port=2525, username="user", password="pw"),
        contact_inbox="inbox@archive.test",
        contact_from_address="contact@archive.test",
    )


@pytest.fixture
def smtp_connection():
    """Patch smtplib.SMTP and yield the connection used inside ``with``."""
    with patch("heritage_archive.contact.mailer.smtplib.SMTP") as mock_smtp:
        connection = MagicMock()
        mock_smtp.return_value.__enter__.return_value = connection
        connection.smtp_class = mock_smtp
        yield connection


class TestContactInquiry:
    """Tests for inquiry validation."""

    def test_valid_inquiry(self):
        inquiry = _inquiry(name="  Ama  ")
        assert inquiry.name == "Ama"

    @pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
    def test_required_fields(self, field):
        with pytest.raises(ValidationError):
            _inquiry(**{field: ""})

    @pytest.mark.parametrize("email", ["ama", "ama@example", "ama @example.com", "@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError, match="Invalid email format"):
            _inquiry(email=email)

    def test_message_too_short(self):
        with pytest.raises(ValidationError, match="at least 10 characters"):
            _inquiry(message="Too short")

    def test_message_too_long(self):
        with pytest.raises(ValidationError, match="less than 5000 characters"):
            _inquiry(message="x" * 5001)

    def test_spam_rejected(self):
        with pytest.raises(ValidationError, match="prohibited content"):
            _inquiry(message="CONGRATULATIONS, you are our lucky visitor today")

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            ContactInquiry(
                name="A", email="a@b.co", subject="s", message="long enough message", phone="1"
            )

    def test_contains_spam(self):
        assert contains_spam("Please Click Here now") is True
        assert contains_spam("A question about kente weaving") is False


class TestTemplates:
    """Tests for template rendering."""

    def test_render_text(self):
        assert render("Hi {{name}}, re: {{subject}}", {"name": "Kofi", "subject": "Drums"}) == (
            "Hi Kofi, re: Drums"
        )

    def test_render_html_escapes_and_breaks_lines(self):
        result = render("<p>{{message}}</p>", {"message": "<b>hi</b>\nthere"}, as_html=True)
        assert result == "<p>&lt;b&gt;hi&lt;/b&gt;<br>there</p>"


class TestContactMailer:
    """Tests for ContactMailer."""

    def test_inquiry_message_headers(self, mail_settings):
        message = ContactMailer(mail_settings).build_inquiry(_inquiry())

        assert message["To"] == "inbox@archive.test"
        assert message["Reply-To"] == "ama@example.com"
        assert message["Subject"] == "[OKYENA COLLECTIVE] Loan request"
        assert "contact@archive.test" in message["From"]
        assert "hammock scan" in message.get_body(("plain",)).get_content()

    def test_auto_reply_goes_to_sender(self, mail_settings):
        message = ContactMailer(mail_settings).build_auto_reply(_inquiry())

        assert message["To"] == "ama@example.com"
        assert message["Reply-To"] is None
        assert "Dear Ama Mensah" in message.get_body(("plain",)).get_content()

    def test_send_delivers_inquiry_and_auto_reply(self, mail_settings, smtp_connection):
        message_id = ContactMailer(mail_settings).send(_inquiry())

        smtp_connection.smtp_class.assert_called_with("smtp.test", 2525, timeout=30)
        smtp_connection.starttls.assert_called()
        smtp_connection.login.assert_called_with("user", "pw")
        sent = [call.args[0] for call in smtp_connection.send_message.call_args_list]
        assert [m["To"] for m in sent] == ["inbox@archive.test", "ama@example.com"]
        assert message_id == sent[0]["Message-ID"]

    def test_no_tls_or_login_when_disabled(self, smtp_connection):
        settings = ArchiveSettings(smtp=SMTPSettings(host="localhost", port=25, use_tls=False))
        ContactMailer(settings).send(_inquiry())

        smtp_connection.starttls.assert_not_called()
        smtp_connection.login.assert_not_called()

    def test_inbox_failure_raises(self, mail_settings, smtp_connection):
        smtp_connection.send_message.side_effect = smtplib.SMTPException("boom")

        with pytest.raises(ContactDeliveryError) as exc_info:
            ContactMailer(mail_settings).send(_inquiry())
        assert exc_info.value.reason == "smtp_error"

    def test_authentication_failure_reason(self, mail_settings, smtp_connection):
        smtp_connection.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")

        with pytest.raises(ContactDeliveryError) as exc_info:
            ContactMailer(mail_settings).send(_inquiry())
        assert exc_info.value.reason == "authentication"

    def test_connection_refused(self, mail_settings):
        with patch(
            "heritage_archive.contact.mailer.smtplib.SMTP",
            side_effect=ConnectionRefusedError("refused"),
        ):
            with pytest.raises(ContactDeliveryError):
                ContactMailer(mail_settings).send(_inquiry())

    def test_auto_reply_failure_is_not_fatal(self, mail_settings, smtp_connection):
        smtp_connection.send_message.side_effect = [None, smtplib.SMTPException("reply failed")]

        message_id = ContactMailer(mail_settings).send(_inquiry())

        assert message_id
        assert smtp_connection.send_message.call_count == 2
