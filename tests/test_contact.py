import smtplib
from urllib.parse import unquote

import pytest
from pydantic import ValidationError

from askyou.config import Settings, get_settings
from askyou.services import contact
from askyou.services.contact import ContactMessage, mailto_url, send_contact_mail


@pytest.fixture
def msg():
    return ContactMessage(name=" Jane ", email="jane@example.com", company="Acme", message="Hello")


def test_subject_and_body(msg):
    assert msg.name == "Jane"
    assert msg.subject == "[AskYou Contact] Jane from Acme"
    assert "Email: jane@example.com" in msg.body
    assert msg.body.endswith("Message:\nHello\n")


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "", "email": "a@b.co", "message": "hi"},
        {"name": "A", "email": "not-an-email", "message": "hi"},
        {"name": "A", "email": "a@b.co", "message": "   "},
    ],
)
def test_invalid_messages(fields):
    with pytest.raises(ValidationError):
        ContactMessage(**fields)


def test_mailto_defaults_to_configured_address(msg, monkeypatch):
    monkeypatch.setenv("CONTACT_EMAIL", "sales@example.org")
    get_settings.cache_clear()
    url = mailto_url(msg)
    assert url.startswith("mailto:sales@example.org?subject=")
    assert unquote(url.split("subject=")[1].split("&")[0]) == msg.subject
    assert "Company: Acme" in unquote(url.split("body=")[1])


def test_no_smtp_no_send(msg):
    assert get_settings().smtp_enabled is False
    assert send_contact_mail(msg) is False


class _FakeSMTP:
    sent = []

    def __init__(self, host, port):
        self.host, self.port = host, port

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        pass

    def login(self, user, password):
        self.user = user

    def send_message(self, mail):
        _FakeSMTP.sent.append(mail)


def test_smtp_send(msg, monkeypatch):
    _FakeSMTP.sent = []
    monkeypatch.setattr(contact.smtplib, "SMTP", _FakeSMTP)
    cfg = Settings(SMTP_HOST="smtp.example.org", SMTP_USER="bot@example.org", SMTP_PASS="x")

    assert send_contact_mail(msg, cfg) is True
    mail = _FakeSMTP.sent[0]
    assert mail["To"] == cfg.CONTACT_EMAIL
    assert mail["Reply-To"] == "jane@example.com"
    assert mail["Subject"] == msg.subject


def test_smtp_failure_is_reported(msg, monkeypatch):
    class _Broken(_FakeSMTP):
        def send_message(self, mail):
            raise smtplib.SMTPException("boom")

    monkeypatch.setattr(contact.smtplib, "SMTP", _Broken)
    assert send_contact_mail(msg, Settings(SMTP_HOST="smtp.example.org")) is False
