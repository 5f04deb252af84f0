"""
Mail transports.

``SmtpTransport`` opens a short SMTP session per message; ``LogTransport``
writes messages to the log and is the default for development.
"""

import logging
import smtplib
from abc import ABC, abstractmethod
from email.message import EmailMessage

from account_service.app.services.mailer import MailMessage

logger = logging.getLogger(__name__)


class MailTransport(ABC):
    @abstractmethod
    def deliver(self, message: MailMessage) -> None:
        pass


class SmtpTransport(MailTransport):
    """Delivers through an SMTP relay"""

    def __init__(self, host: str, port: int, sender: str):
        self.host = host
        self.port = port
        self.sender = sender

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.sender
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content(message.body)
        return email

    def deliver(self, message: MailMessage) -> None:
        try:
            with smtplib.SMTP(host=self.host, port=self.port) as conn:
                conn.send_message(self._build(message))
        except (smtplib.SMTPException, OSError):
            logger.exception("Failed to deliver mail to %s", message.to)
            return
        logger.info("Mail delivered to %s: %s", message.to, message.subject)


class LogTransport(MailTransport):
    """Writes outgoing mail to the log instead of sending it"""

    def __init__(self, sender: str = ""):
        self.sender = sender

    def deliver(self, message: MailMessage) -> None:
        logger.info(
            "Mail from %s to %s: %s\n%s", self.sender, message.to, message.subject, message.body
        )


def build_mail_transport(config) -> MailTransport:
    if config.MAIL_BACKEND == "smtp":
        return SmtpTransport(config.SMTP_HOST, int(config.SMTP_PORT), config.MAIL_FROM)
    if config.MAIL_BACKEND == "log":
        return LogTransport(config.MAIL_FROM)
    raise ValueError(f"Unknown MAIL_BACKEND: {config.MAIL_BACKEND}")
