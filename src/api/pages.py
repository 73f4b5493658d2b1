"""
Page Responses

The site controller answers every action with one of three outcomes:
render a view, redirect somewhere else, or refresh (redirect to the same URL).
A one-shot notice travels with the response; showing it on the next rendered
page is up to the web layer in front of this service.
"""

from typing import Any, Dict, List, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from config import ApplicationConfig

# Submitted values never echoed back into a form
SECRET_FIELDS = {"password"}


class Notice(BaseModel):
    """Flash message for the next rendered page"""

    type: str  # "success" | "error"
    message: str


class FormState(BaseModel):
    """Submitted values and field errors of a form"""

    variant: Optional[str] = None
    values: Dict[str, Any] = Field(default_factory=dict)
    errors: Dict[str, List[str]] = Field(default_factory=dict)


class PageResponse(BaseModel):
    """Body of every site controller response"""

    view: Optional[str] = None
    form: Optional[FormState] = None
    notice: Optional[Notice] = None
    location: Optional[str] = None
    access_token: Optional[str] = None


def success(message: str) -> Notice:
    return Notice(type="success", message=message)


def error(message: str) -> Notice:
    return Notice(type="error", message=message)


def form_state(
    payload: Optional[Dict[str, Any]] = None,
    errors: Optional[Dict[str, List[str]]] = None,
    variant: Optional[str] = None,
) -> FormState:
    values = {k: v for k, v in (payload or {}).items() if k not in SECRET_FIELDS}
    return FormState(variant=variant, values=values, errors=errors or {})


def render(
    view: str,
    form: Optional[FormState] = None,
    notice: Optional[Notice] = None,
) -> JSONResponse:
    page = PageResponse(view=view, form=form, notice=notice)
    return JSONResponse(status_code=status.HTTP_200_OK, content=page.model_dump(mode="json"))


def redirect(
    location: str,
    notice: Optional[Notice] = None,
    access_token: Optional[str] = None,
) -> JSONResponse:
    page = PageResponse(location=location, notice=notice, access_token=access_token)
    return JSONResponse(
        status_code=status.HTTP_303_SEE_OTHER,
        content=page.model_dump(mode="json"),
        headers={"Location": location},
    )


def refresh(request: Request, notice: Optional[Notice] = None) -> JSONResponse:
    location = request.url.path
    if request.url.query:
        location = f"{location}?{request.url.query}"
    return redirect(location, notice=notice)


def go_home(notice: Optional[Notice] = None, access_token: Optional[str] = None) -> JSONResponse:
    return redirect("/", notice=notice, access_token=access_token)


def safe_return_url(next_url: Optional[str]) -> str:
    """Local path to return to after login; anything else falls back to home"""
    # Browsers drop tabs and newlines, turning "/\t/host" into "//host"
    if next_url and any(ord(char) < 0x20 or ord(char) == 0x7F for char in next_url):
        return "/"
    if not next_url or not next_url.startswith("/") or next_url.startswith("//"):
        return "/"
    if "\\" in next_url:
        return "/"
    return next_url


def absolute_url(request: Request, name: str) -> str:
    """Public URL of a route, for links sent by email"""
    return f"{ApplicationConfig.SITE_URL.rstrip('/')}{request.app.url_path_for(name)}"
