from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    root_path: str = ""

    reload: bool = False

    recaptcha_site_key: str = ""
    recaptcha_secret_key: str = ""
    recaptcha_verify_url: str = "https://www.google.com/recaptcha/api/siteverify"
    recaptcha_min_score: float = 0.5
    recaptcha_action: str = "submit"

    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_tls: bool = False
    smtp_starttls: bool = True
    mail_username: str = ""
    mail_password: str = ""
    smtp_from: str | None = None

    contact_email: str | None = None

    mailchimp_api_key: str = ""
    mailchimp_list_id: str = ""
    mailchimp_server: str | None = None

    sentry_dsn: str | None = None
    sentry_environment: str = "test"

    @property
    def mail_sender(self) -> str:
        return self.smtp_from or self.mail_username

    @property
    def mail_recipient(self) -> str:
        return self.contact_email or self.mail_username


settings = Settings()
