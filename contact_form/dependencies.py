from fastapi import Depends

from .services.mailchimp import ListSubscriber, MailchimpSubscriber
from .settings import Settings, settings
from .utils.email import Mailer, SmtpMailer
from .utils.recaptcha import CaptchaVerifier, RecaptchaVerifier


def get_settings() -> Settings:
    return settings


def get_verifier(settings: Settings = Depends(get_settings)) -> CaptchaVerifier:
    return RecaptchaVerifier(settings)


def get_mailer(settings: Settings = Depends(get_settings)) -> Mailer:
    return SmtpMailer(settings)


def get_subscriber(settings: Settings = Depends(get_settings)) -> ListSubscriber:
    return MailchimpSubscriber(settings)
