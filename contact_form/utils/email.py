from email.errors import MessageError
from email.mime.text import MIMEText
from pathlib import Path
from typing import Protocol

import aiosmtplib
from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..logger import get_logger
from ..schemas.contact import Submission
from ..settings import Settings


logger = get_logger(__name__)


# submissions are escaped by the validator, so text templates are rendered verbatim
env = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "../../templates"),
    autoescape=select_autoescape(["html"]),
    keep_trailing_newline=True,
)


class EmailDeliveryError(Exception):
    pass


class Mailer(Protocol):
    async def send(self, message: MIMEText) -> None:
        ...


class SmtpMailer:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    async def send(self, message: MIMEText) -> None:
        logger.info(f"Sending email to {message['To']} ({message['Subject']})")
        try:
            await aiosmtplib.send(
                message,
                hostname=self.settings.smtp_host,
                port=self.settings.smtp_port,
                username=self.settings.mail_username or None,
                password=self.settings.mail_password or None,
                use_tls=self.settings.smtp_tls,
                start_tls=self.settings.smtp_starttls,
            )
        except (aiosmtplib.SMTPException, MessageError, OSError) as e:
            raise EmailDeliveryError(str(e)) from e
        logger.info("Email sent successfully")


def format_services(services: list[str]) -> str:
    return ", ".join(services) if services else "None"


def build_notification(submission: Submission, *, sender: str, recipient: str) -> MIMEText:
    body = env.get_template("emails/contact_notification.txt").render(
        submission=submission, services=format_services(submission.service)
    )

    message = MIMEText(body, "plain", "utf-8")
    message["From"] = sender
    message["To"] = recipient
    # header values must stay on one line
    subject = f"You have a new message from {submission.first_name} {submission.last_name}"
    message["Subject"] = " ".join(subject.split())
    message["Reply-To"] = submission.email
    return message
