from abc import ABC, abstractmethod
from typing import Optional


class Mailer(ABC):
    """Outgoing email - application layer"""

    @abstractmethod
    async def send(
        self,
        to: str,
        subject: str,
        text: str,
        reply_to: Optional[str] = None,
    ) -> bool:
        """
        Send a plain text email.

        Returns:
            True if the message was handed to the transport, False otherwise.
            Transport failures are reported through the return value, not raised.
        """
        pass


class SiteMailer:
    """Composes the site's emails and hands them to a Mailer."""

    def __init__(self, mailer: Mailer, site_name: str = "Site"):
        self.mailer = mailer
        self.site_name = site_name

    async def send_account_activation(self, to: str, username: str, link: str) -> bool:
        subject = f"Account activation for {self.site_name}"
        text = (
            f"Hello {username},\n"
            f"\n"
            f"Follow the link below to activate your account:\n"
            f"\n"
            f"{link}\n"
        )
        return await self.mailer.send(to=to, subject=subject, text=text)

    async def send_password_reset(self, to: str, username: str, link: str) -> bool:
        subject = f"Password reset for {self.site_name}"
        text = (
            f"Hello {username},\n"
            f"\n"
            f"Follow the link below to reset your password:\n"
            f"\n"
            f"{link}\n"
            f"\n"
            f"If you didn't request this email, you can safely ignore it.\n"
        )
        return await self.mailer.send(to=to, subject=subject, text=text)

    async def send_contact(self, admin_email: str, name: str, email: str, subject: str, body: str) -> bool:
        text = f"From: {name} <{email}>\n\n{body}\n"
        return await self.mailer.send(to=admin_email, subject=subject, text=text, reply_to=email)
