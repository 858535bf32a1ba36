from pathlib import Path

import pytest
from _pytest.monkeypatch import MonkeyPatch
from pydantic import ValidationError

from contact_form.settings import Settings


def test__settings__from_environment(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("RECAPTCHA_SITE_KEY", "site")
    monkeypatch.setenv("RECAPTCHA_SECRET_KEY", "secret")
    monkeypatch.setenv("MAIL_USERNAME", "me@example.com")
    monkeypatch.setenv("MAILCHIMP_LIST_ID", "abc")

    settings = Settings(_env_file=None)

    assert settings.recaptcha_site_key == "site"
    assert settings.recaptcha_secret_key == "secret"
    assert settings.mail_username == "me@example.com"
    assert settings.mailchimp_list_id == "abc"
    assert settings.recaptcha_min_score == 0.5
    assert settings.recaptcha_action == "submit"


@pytest.mark.parametrize(
    "smtp_from,contact_email,sender,recipient",
    [
        (None, None, "me@example.com", "me@example.com"),
        ("noreply@example.com", "team@example.com", "noreply@example.com", "team@example.com"),
    ],
)
def test__settings__mail_addresses(
    smtp_from: str | None, contact_email: str | None, sender: str, recipient: str
) -> None:
    settings = Settings(
        _env_file=None, mail_username="me@example.com", smtp_from=smtp_from, contact_email=contact_email
    )

    assert settings.mail_sender == sender
    assert settings.mail_recipient == recipient


def test__settings__immutable() -> None:
    settings = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.recaptcha_secret_key = "changed"  # type: ignore[misc]


def test__settings__env_file(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    tmp_path.joinpath(".env").write_text("CONTACT_EMAIL=team@example.com\nSMTP_FROM=noreply@example.com\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONTACT_EMAIL", raising=False)
    monkeypatch.delenv("SMTP_FROM", raising=False)

    assert Settings().contact_email == "team@example.com"
    assert Settings().smtp_from == "noreply@example.com"
    assert Settings(_env_file=None).contact_email is None
    assert Settings(_env_file=None).smtp_from is None


def test__settings__fields() -> None:
    assert "debug" not in Settings.model_fields
    assert {"host", "port", "root_path", "reload"} <= Settings.model_fields.keys()
