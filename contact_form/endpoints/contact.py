"""Endpoints for the contact form"""

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from starlette.datastructures import FormData

from ..dependencies import get_mailer, get_settings, get_subscriber, get_verifier
from ..exceptions.contact import CouldNotSendMessageError
from ..exceptions.recaptcha import (
    MissingRecaptchaTokenError,
    RecaptchaError,
    RecaptchaRejectedError,
    RecaptchaVerificationError,
)
from ..logger import get_logger
from ..schemas.contact import ContactContext, Submission
from ..services.mailchimp import ListSubscriber, ListSubscriptionError, Member
from ..settings import Settings
from ..utils.docs import responses
from ..utils.email import EmailDeliveryError, Mailer, build_notification
from ..utils.recaptcha import RECAPTCHA_FIELD, CaptchaVerifier, check_recaptcha
from ..utils.templates import render_contact
from ..utils.validation import validate_contact_form


router = APIRouter(tags=["contact"])
logger = get_logger(__name__)

SUCCESS_MESSAGE = "Form submitted successfully!"
MULTI_VALUE_FIELDS = {"service"}


def read_form(form: FormData) -> dict[str, Any]:
    """Return the submitted values as they were entered, keeping every selection of multi value fields."""

    return {
        key: form.getlist(key) if key in MULTI_VALUE_FIELDS else form.get(key)
        for key in form.keys()
        if key != RECAPTCHA_FIELD
    }


def build_submission(values: dict[str, str], form_data: dict[str, Any]) -> Submission:
    return Submission(
        first_name=values["first_name"],
        last_name=values["last_name"],
        email=values["email"],
        phone=form_data.get("phone") or None,
        newsletter=bool(form_data.get("newsletter")),
        service=[s for s in form_data.get("service", []) if isinstance(s, str)],
        referral=form_data.get("referral") or None,
        message=values["message"],
    )


@router.get("/contact-us", response_class=HTMLResponse)
async def contact_form(request: Request, settings: Settings = Depends(get_settings)) -> Any:
    """Render the empty contact form."""

    return render_contact(request, ContactContext(site_key=settings.recaptcha_site_key))


@router.post(
    "/contact-us",
    response_class=HTMLResponse,
    responses=responses(
        MissingRecaptchaTokenError, RecaptchaRejectedError, RecaptchaVerificationError, CouldNotSendMessageError
    ),
)
async def submit_contact_form(
    request: Request,
    settings: Settings = Depends(get_settings),
    verifier: CaptchaVerifier = Depends(get_verifier),
    mailer: Mailer = Depends(get_mailer),
    subscriber: ListSubscriber = Depends(get_subscriber),
) -> Any:
    """
    Submit the contact form.

    The fields are validated first, then the reCAPTCHA token (`g-recaptcha-response`) is verified. On success the
    submission is emailed to the operator and, if `newsletter` is set, the sender is subscribed to the mailing list.
    Subscribing is best-effort: a failure is logged and does not affect the response.
    """

    form = await request.form()
    form_data = read_form(form)

    result = validate_contact_form(form_data)
    if not result.valid:
        return render_contact(
            request,
            ContactContext(errors=result.errors, form_data=form_data, site_key=settings.recaptcha_site_key),
            status.HTTP_400_BAD_REQUEST,
        )

    token = form.get(RECAPTCHA_FIELD)
    try:
        await check_recaptcha(verifier, token if isinstance(token, str) else None, settings)
    except RecaptchaError as e:
        return render_contact(
            request,
            ContactContext(errors={"captcha": e.detail}, form_data=form_data, site_key=settings.recaptcha_site_key),
            e.status_code,
        )

    submission = build_submission(result.values, form_data)
    notification = build_notification(submission, sender=settings.mail_sender, recipient=settings.mail_recipient)

    try:
        await mailer.send(notification)
    except EmailDeliveryError:
        logger.exception("Error sending email")
        raise CouldNotSendMessageError

    if submission.newsletter:
        try:
            await subscriber.subscribe(Member(submission.email, submission.first_name, submission.last_name))
        except ListSubscriptionError as e:
            logger.warning(f"Could not subscribe {submission.email} to the mailing list: {e}")

    return render_contact(
        request, ContactContext(success_message=SUCCESS_MESSAGE, site_key=settings.recaptcha_site_key)
    )
