"""Static pages and the contact form."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request

from config import ApplicationConfig
from src.api.error import ServerError
from src.api.pages import PageResponse, error, form_state, refresh, render, success
from src.api.utils.forms import parse_form
from src.app.services.mailer import SiteMailer
from src.app.use_cases.site import ContactForm, ContactUseCase
from src.depends import get_site_mailer

router = APIRouter(tags=["Site"])


@router.get("/", name="index", response_model=PageResponse)
async def index():
    return render("index")


@router.get("/about", name="about", response_model=PageResponse)
async def about():
    return render("about")


@router.get("/contact", name="contact", response_model=PageResponse)
async def contact_page():
    return render("contact", form_state())


@router.post("/contact", response_model=PageResponse)
async def contact(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(None),
    mailer: SiteMailer = Depends(get_site_mailer),
):
    """
    Send the contact message to the site administrator.

    Valid input always ends in a refresh, with a success or error notice.
    """
    parsed = parse_form(ContactForm, payload)
    if parsed.is_err():
        return render("contact", form_state(payload, parsed.error.details))

    result = await ContactUseCase(mailer, ApplicationConfig.ADMIN_EMAIL).execute(parsed.value)

    if result.is_err():
        error_ = result.error
        if error_.code == "SEND_FAILED":
            return refresh(request, error(error_.message))
        raise ServerError(error_)

    return refresh(
        request,
        success("Thank you for contacting us. We will respond to you as soon as possible."),
    )
