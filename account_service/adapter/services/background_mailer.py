from fastapi import BackgroundTasks

from account_service.adapter.services.mail_transport import MailTransport
from account_service.app.services.mailer import MailMessage, Mailer


class BackgroundMailer(Mailer):
    """Queues delivery to run after the HTTP response has been sent"""

    def __init__(self, background_tasks: BackgroundTasks, transport: MailTransport):
        self.background_tasks = background_tasks
        self.transport = transport

    def send(self, message: MailMessage) -> None:
        self.background_tasks.add_task(self.transport.deliver, message)
