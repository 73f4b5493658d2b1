"""
Contact Use Case

Forwards a contact form message to the site administrator.
"""

from libs.result import Error, Result, Return
from src.app.services.mailer import SiteMailer
from .forms import ContactForm


class ContactUseCase:
    """
    Use case for the contact page.

    Business Rules:
    - Message goes to the configured admin address, reply-to the sender
    - A failed send is reported as SEND_FAILED
    """

    def __init__(self, mailer: SiteMailer, admin_email: str):
        self.mailer = mailer
        self.admin_email = admin_email

    async def execute(self, form: ContactForm) -> Result[None]:
        sent = await self.mailer.send_contact(
            self.admin_email,
            name=form.name,
            email=form.email,
            subject=form.subject,
            body=form.body,
        )
        if not sent:
            return Return.err(Error("SEND_FAILED", "There was an error sending email."))
        return Return.ok(None)
