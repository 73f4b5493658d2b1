"""Mail backends for the Mailer interface."""

import logging
from email.message import EmailMessage
from typing import Optional

import aiosmtplib

from config import ApplicationConfig
from src.app.services.mailer import Mailer

logger = logging.getLogger(__name__)


class ConsoleMailer(Mailer):
    """Mailer that logs messages instead of sending them (for development)."""

    async def send(
        self,
        to: str,
        subject: str,
        text: str,
        reply_to: Optional[str] = None,
    ) -> bool:
        logger.info(
            f"\n{'=' * 60}\n"
            f"EMAIL (console backend - not sent)\n"
            f"To: {to}\n"
            f"Reply-To: {reply_to or '-'}\n"
            f"Subject: {subject}\n"
            f"{'=' * 60}\n"
            f"{text}\n"
            f"{'=' * 60}"
        )
        return True


class SmtpMailer(Mailer):
    """Mailer using SMTP."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_tls: bool = True,
        from_address: str = "",
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.from_address = from_address

    async def send(
        self,
        to: str,
        subject: str,
        text: str,
        reply_to: Optional[str] = None,
    ) -> bool:
        message = EmailMessage()
        message["From"] = self.from_address
        message["To"] = to
        message["Subject"] = subject
        if reply_to:
            message["Reply-To"] = reply_to
        message.set_content(text)

        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                start_tls=self.use_tls,
            )
        except aiosmtplib.SMTPException as e:
            logger.error(f"Failed to send email via SMTP to {to}: {e}")
            return False
        except OSError as e:
            logger.error(f"SMTP server unreachable while sending to {to}: {e}")
            return False

        logger.info(f"Email sent via SMTP to {to}")
        return True


def build_mailer(config=ApplicationConfig) -> Mailer:
    """Build the mailer selected by EMAIL_BACKEND."""
    if config.EMAIL_BACKEND == "console":
        return ConsoleMailer()
    if config.EMAIL_BACKEND == "smtp":
        return SmtpMailer(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            use_tls=config.SMTP_USE_TLS,
            from_address=config.EMAIL_FROM,
        )
    raise ValueError(f"Unknown email backend: {config.EMAIL_BACKEND}")
