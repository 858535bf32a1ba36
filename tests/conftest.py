from collections.abc import Iterator
from email.mime.text import MIMEText
from typing import Any

import pytest
from aiosmtplib.email import flatten_message
from fastapi.testclient import TestClient

from contact_form.app import app
from contact_form.dependencies import get_mailer, get_settings, get_subscriber, get_verifier
from contact_form.services.mailchimp import ListSubscriptionError, Member
from contact_form.settings import Settings
from contact_form.utils.email import EmailDeliveryError
from contact_form.utils.recaptcha import VerificationOutcome


class FakeVerifier:
    def __init__(self, outcome: VerificationOutcome | None = None, error: Exception | None = None) -> None:
        self.outcome = outcome or VerificationOutcome(success=True, score=0.9, action="submit")
        self.error = error
        self.tokens: list[str] = []

    async def verify(self, token: str) -> VerificationOutcome:
        self.tokens.append(token)
        if self.error:
            raise self.error
        return self.outcome


class FakeMailer:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.messages: list[MIMEText] = []

    async def send(self, message: MIMEText) -> None:
        self.messages.append(message)
        flatten_message(message)
        if self.fail:
            raise EmailDeliveryError("Connection refused")


class FakeSubscriber:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.members: list[Member] = []

    async def subscribe(self, member: Member) -> None:
        self.members.append(member)
        if self.fail:
            raise ListSubscriptionError("Member Exists")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        recaptcha_site_key="site-key",
        recaptcha_secret_key="secret-key",
        mail_username="operator@example.com",
        mail_password="password",
        mailchimp_api_key="key-us6",
        mailchimp_list_id="list42",
    )


@pytest.fixture
def verifier() -> FakeVerifier:
    return FakeVerifier()


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def subscriber() -> FakeSubscriber:
    return FakeSubscriber()


@pytest.fixture
def client(
    settings: Settings, verifier: FakeVerifier, mailer: FakeMailer, subscriber: FakeSubscriber
) -> Iterator[TestClient]:
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_verifier] = lambda: verifier
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_subscriber] = lambda: subscriber
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def form() -> dict[str, Any]:
    return {
        "first_name": "Alice",
        "last_name": "Smith",
        "email": "alice@example.com",
        "phone": "",
        "service": ["Web Design", "SEO"],
        "referral": "Search Engine",
        "message": "Hello there!",
        "g-recaptcha-response": "token",
    }
