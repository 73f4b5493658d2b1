"""
Authentication pages: login, logout, signup, account activation and
password reset.
"""

import logging
from html import escape
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request

from src.api.error import BadTokenError, ServerError
from src.api.pages import (
    PageResponse,
    absolute_url,
    error,
    form_state,
    go_home,
    redirect,
    refresh,
    render,
    safe_return_url,
    success,
)
from src.api.utils.forms import parse_form, variant_of
from src.app.services.context import RequestContext
from src.app.services.mailer import SiteMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ActivateAccountUseCase,
    LoginUseCase,
    LogoutUseCase,
    PasswordResetRequestForm,
    RequestPasswordResetUseCase,
    ResendActivationForm,
    ResendActivationUseCase,
    ResetPasswordForm,
    ResetPasswordUseCase,
    SignupUseCase,
    login_form_for,
    signup_form_for,
)
from src.depends import (
    get_request_context,
    get_site_mailer,
    get_unit_of_work,
    require_guest,
    require_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

TOKEN_ERRORS = ("MALFORMED_TOKEN", "INVALID_TOKEN")


# ============================================================================
# Login / logout
# ============================================================================


@router.get("/login", name="login", response_model=PageResponse)
async def login_page(context: RequestContext = Depends(get_request_context)):
    """Login form. Logged-in users are sent home."""
    if not context.is_guest:
        return go_home()

    form_cls = login_form_for(context.settings)
    return render("login", form_state(variant=variant_of(form_cls)))


@router.post("/login", response_model=PageResponse)
async def login(
    request: Request,
    next: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = Body(None),
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Log the user in.

    Outcomes, in order:
        - 303 home: already logged in
        - 303 to `next` (or home) with access_token: logged in
        - 303 refresh with error notice: account not activated yet
        - 200 login view with field errors: bad input or credentials
    """
    if not context.is_guest:
        return go_home()

    form_cls = login_form_for(context.settings)
    variant = variant_of(form_cls)

    parsed = parse_form(form_cls, payload)
    if parsed.is_err():
        return render("login", form_state(payload, parsed.error.details, variant))

    result = await LoginUseCase(uow).execute(parsed.value)

    if result.is_err():
        error_ = result.error
        if error_.code == "INVALID_CREDENTIALS":
            return render("login", form_state(payload, {"password": [error_.message]}, variant))
        if error_.code == "ACCOUNT_NOT_ACTIVATED":
            return refresh(request, error(error_.message))
        raise ServerError(error_)

    return redirect(safe_return_url(next), access_token=result.value.access_token)


@router.post("/logout", name="logout", response_model=PageResponse)
async def logout(
    context: RequestContext = Depends(require_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Log the user out. POST only; requires a logged-in user."""
    identity = context.identity
    result = await LogoutUseCase(uow).execute(identity.user_id, identity.session_id)
    if result.is_err():
        raise ServerError(result.error)

    return go_home()


# ============================================================================
# Password reset
# ============================================================================


@router.get("/request-password-reset", name="request_password_reset", response_model=PageResponse)
async def request_password_reset_page():
    return render("requestPasswordResetToken", form_state())


@router.post("/request-password-reset", response_model=PageResponse)
async def request_password_reset(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: SiteMailer = Depends(get_site_mailer),
):
    """
    Send an email with a password reset link.

    Unknown email and a failed email produce the same page.
    """
    parsed = parse_form(PasswordResetRequestForm, payload)
    if parsed.is_err():
        return render("requestPasswordResetToken", form_state(payload, parsed.error.details))

    use_case = RequestPasswordResetUseCase(uow, mailer, absolute_url(request, "reset_password"))
    result = await use_case.execute(parsed.value)

    if result.is_err():
        error_ = result.error
        if error_.code == "RESET_UNAVAILABLE":
            return render(
                "requestPasswordResetToken", form_state(payload), error(error_.message)
            )
        raise ServerError(error_)

    return go_home(success("Check your email for further instructions."))


@router.get("/reset-password", name="reset_password", response_model=PageResponse)
async def reset_password_page(
    token: Optional[str] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """New password form. A bad token is rejected with 400 before the form is shown."""
    checked = await ResetPasswordUseCase(uow).check(token)
    if checked.is_err():
        raise BadTokenError(checked.error)

    return render("resetPassword", form_state())


@router.post("/reset-password", response_model=PageResponse)
async def reset_password(
    token: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = Body(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Save the new password.

    Raises:
        - 400 Bad Request: Malformed, unknown or expired token
    """
    use_case = ResetPasswordUseCase(uow)

    checked = await use_case.check(token)
    if checked.is_err():
        raise BadTokenError(checked.error)

    parsed = parse_form(ResetPasswordForm, payload)
    if parsed.is_err():
        return render("resetPassword", form_state(payload, parsed.error.details))

    result = await use_case.execute(token, parsed.value)

    if result.is_err():
        error_ = result.error
        if error_.code in TOKEN_ERRORS:
            return render("resetPassword", form_state(payload, {"token": [error_.message]}))
        raise ServerError(error_)

    return go_home(success("New password was saved."))


# ============================================================================
# Signup / account activation
# ============================================================================


@router.get("/signup", name="signup", response_model=PageResponse)
async def signup_page(context: RequestContext = Depends(require_guest)):
    form_cls = signup_form_for(context.settings)
    return render("signup", form_state(variant=variant_of(form_cls)))


@router.post("/signup", response_model=PageResponse)
async def signup(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(None),
    context: RequestContext = Depends(require_guest),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: SiteMailer = Depends(get_site_mailer),
):
    """
    Sign the user up.

    When REGISTRATION_NEEDS_ACTIVATION is on, the account stays pending and an
    activation link is emailed; otherwise the user is logged in right away.
    """
    form_cls = signup_form_for(context.settings)
    variant = variant_of(form_cls)

    parsed = parse_form(form_cls, payload)
    if parsed.is_err():
        return render("signup", form_state(payload, parsed.error.details, variant))

    use_case = SignupUseCase(uow, mailer, absolute_url(request, "activate_account"))
    result = await use_case.execute(parsed.value)

    if result.is_err():
        error_ = result.error
        if error_.code == "VALIDATION_FAILED":
            return render("signup", form_state(payload, error_.details, variant))
        if error_.code == "SIGNUP_FAILED":
            return refresh(request, error(error_.message))
        raise ServerError(error_)

    signed_up = result.value

    if signed_up.activation_required:
        if signed_up.activation_email_sent:
            return refresh(
                request,
                success(
                    f"Hello {escape(signed_up.username)}. "
                    "To be able to log in, you need to confirm your registration. "
                    "Please check your email, we have sent you a message."
                ),
            )
        return refresh(
            request,
            error("We couldn't send you account activation email, please contact us."),
        )

    if signed_up.access_token:
        return go_home(access_token=signed_up.access_token)

    # Session could not be started; nothing more to tell the user
    return refresh(request)


@router.get("/activate-account", name="activate_account", response_model=PageResponse)
async def activate_account(
    token: Optional[str] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Activate the account named by the token, then send the user to login.

    Raises:
        - 400 Bad Request: Malformed, unknown or expired token
    """
    use_case = ActivateAccountUseCase(uow)

    checked = await use_case.check(token)
    if checked.is_err():
        raise BadTokenError(checked.error)

    username = escape(checked.value.username)
    result = await use_case.execute(token)

    if result.is_err():
        logger.warning(f"Account of user {checked.value.username} could not be activated: {result.error.code}")
        return redirect(
            "/login",
            error(f"{username} your account could not be activated, please contact us!"),
        )

    return redirect(
        "/login",
        success(f"Success! You can now log in. Thank you {username} for joining us!"),
    )


@router.get("/resend-activation", name="resend_activation", response_model=PageResponse)
async def resend_activation_page():
    return render("resendActivation", form_state())


@router.post("/resend-activation", response_model=PageResponse)
async def resend_activation(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: SiteMailer = Depends(get_site_mailer),
):
    """Email a new activation link to a pending account. Same answer for every email."""
    parsed = parse_form(ResendActivationForm, payload)
    if parsed.is_err():
        return render("resendActivation", form_state(payload, parsed.error.details))

    use_case = ResendActivationUseCase(uow, mailer, absolute_url(request, "activate_account"))
    result = await use_case.execute(parsed.value)
    if result.is_err():
        raise ServerError(result.error)

    return redirect(
        "/login",
        success(
            "If your account is waiting for activation, "
            "we have sent you a new activation link. Please check your email."
        ),
    )
