from __future__ import annotations

import logging
import re
import smtplib
from email.message import EmailMessage
from urllib.parse import quote

from pydantic import BaseModel, field_validator

from askyou.config import Settings, get_settings

log = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ContactMessage(BaseModel):
    name: str
    email: str
    company: str = ""
    message: str

    @field_validator("name", "message")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        v = (v or "").strip()
        if not _EMAIL_RE.match(v):
            raise ValueError("is not a valid email address")
        return v

    @field_validator("company")
    @classmethod
    def _strip(cls, v: str) -> str:
        return (v or "").strip()

    @property
    def subject(self) -> str:
        return f"[AskYou Contact] {self.name} from {self.company}"

    @property
    def body(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Email: {self.email}\n"
            f"Company: {self.company}\n"
            "\n"
            "Message:\n"
            f"{self.message}\n"
        )


def mailto_url(msg: ContactMessage, to_email: str | None = None) -> str:
    to = to_email or get_settings().CONTACT_EMAIL
    return f"mailto:{to}?subject={quote(msg.subject, safe='')}&body={quote(msg.body, safe='')}"


def send_contact_mail(msg: ContactMessage, settings: Settings | None = None) -> bool:
    """Deliver via SMTP (STARTTLS). False if SMTP is not configured or the send failed."""
    cfg = settings or get_settings()
    if not cfg.smtp_enabled:
        return False

    mail = EmailMessage()
    mail["Subject"] = msg.subject
    mail["From"] = cfg.MAIL_FROM or cfg.SMTP_USER or cfg.CONTACT_EMAIL
    mail["To"] = cfg.CONTACT_EMAIL
    mail["Reply-To"] = msg.email
    mail.set_content(msg.body)

    try:
        with smtplib.SMTP(cfg.SMTP_HOST, cfg.SMTP_PORT) as server:
            server.starttls()
            if cfg.SMTP_USER:
                server.login(cfg.SMTP_USER, cfg.SMTP_PASS or "")
            server.send_message(mail)
    except (smtplib.SMTPException, OSError) as e:
        log.error("contact mail to %s failed: %s", cfg.CONTACT_EMAIL, e)
        return False

    log.info("contact mail sent for %s", msg.email)
    return True
