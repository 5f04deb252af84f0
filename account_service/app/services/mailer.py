"""
Mail dispatch port.

Use cases build a MailMessage and hand it to a Mailer after their
transaction commits. Transport details live in the adapter layer.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel


class MailMessage(BaseModel):
    to: str
    subject: str
    body: str


class Mailer(ABC):
    """Accepts messages for delivery; delivery itself is asynchronous"""

    @abstractmethod
    def send(self, message: MailMessage) -> None:
        pass


def reset_password_message(to: str, url: str) -> MailMessage:
    body = (
        "A password reset was requested for your account.\n\n"
        "Open the following URL within 24 hours to sign in and choose a new password:\n\n"
        f"{url}\n\n"
        "If you did not request this, you can ignore this message.\n"
    )
    return MailMessage(to=to, subject="Reset Password", body=body)


def contact_confirmation_message(to: str, url: str) -> MailMessage:
    body = (
        "Please confirm that this address belongs to your account by opening "
        "the following URL within 24 hours:\n\n"
        f"{url}\n"
    )
    return MailMessage(to=to, subject="Address Confirmation", body=body)
