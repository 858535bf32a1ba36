from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Submission(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str = Field(min_length=3, description="First name of the sender (escaped)")
    last_name: str = Field(min_length=2, description="Last name of the sender (escaped)")
    email: str = Field(min_length=3, description="Normalized email address of the sender")
    phone: str | None = Field(None, description="Phone number of the sender")
    newsletter: bool = Field(False, description="Whether the sender wants to subscribe to the newsletter")
    service: list[str] = Field(default_factory=list, description="Services the sender is interested in")
    referral: str | None = Field(None, description="How the sender found us")
    message: str = Field(min_length=1, description="Content of the message (escaped)")


class ContactContext(BaseModel):
    title: str = "Contact Us"
    errors: dict[str, str] = Field(default_factory=dict, description="Error message by field name")
    form_data: dict[str, Any] = Field(default_factory=dict, description="Submitted values to fill the form with")
    success_message: str | None = None
    site_key: str = ""
