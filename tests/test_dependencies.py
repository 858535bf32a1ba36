from contact_form import settings as settings_module
from contact_form.dependencies import get_mailer, get_settings, get_subscriber, get_verifier
from contact_form.services.mailchimp import MailchimpSubscriber
from contact_form.settings import Settings
from contact_form.utils.email import SmtpMailer
from contact_form.utils.recaptcha import RecaptchaVerifier


def test__get_settings() -> None:
    assert get_settings() is settings_module.settings


def test__components_use_given_settings(settings: Settings) -> None:
    verifier = get_verifier(settings)
    mailer = get_mailer(settings)
    subscriber = get_subscriber(settings)

    assert isinstance(verifier, RecaptchaVerifier) and verifier.settings is settings
    assert isinstance(mailer, SmtpMailer) and mailer.settings is settings
    assert isinstance(subscriber, MailchimpSubscriber) and subscriber.settings is settings
