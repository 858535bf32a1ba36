from dataclasses import dataclass
from typing import Any, Protocol

from httpx import AsyncBaseTransport, AsyncClient, HTTPError

from ..logger import get_logger
from ..settings import Settings


logger = get_logger(__name__)

DEFAULT_SERVER = "us6"


class ListSubscriptionError(Exception):
    pass


@dataclass(frozen=True)
class Member:
    email: str
    first_name: str
    last_name: str

    @property
    def serialize(self) -> dict[str, Any]:
        return {
            "email_address": self.email,
            "status": "subscribed",
            "merge_fields": {"FNAME": self.first_name, "LNAME": self.last_name},
        }


class ListSubscriber(Protocol):
    async def subscribe(self, member: Member) -> None:
        ...


def get_server(settings: Settings) -> str:
    if settings.mailchimp_server:
        return settings.mailchimp_server
    _, _, server = settings.mailchimp_api_key.rpartition("-")
    return server if server and server != settings.mailchimp_api_key else DEFAULT_SERVER


class MailchimpSubscriber:
    def __init__(self, settings: Settings, *, transport: AsyncBaseTransport | None = None) -> None:
        self.settings = settings
        self.transport = transport

    @property
    def url(self) -> str:
        return f"https://{get_server(self.settings)}.api.mailchimp.com/3.0/lists/{self.settings.mailchimp_list_id}"

    async def subscribe(self, member: Member) -> None:
        if not self.settings.mailchimp_api_key or not self.settings.mailchimp_list_id:
            raise ListSubscriptionError("Mailchimp is not configured")

        try:
            async with AsyncClient(transport=self.transport) as client:
                resp = await client.post(
                    self.url,
                    json={"members": [member.serialize], "update_existing": False},
                    headers={"Authorization": f"apikey {self.settings.mailchimp_api_key}"},
                )
        except HTTPError as e:
            raise ListSubscriptionError(f"Mailchimp request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = {}

        if resp.status_code >= 400:
            raise ListSubscriptionError(f"Mailchimp returned status {resp.status_code}: {data}")
        if isinstance(data, dict) and (errors := data.get("errors")):
            raise ListSubscriptionError(f"Mailchimp rejected the member: {errors}")

        logger.info(f"Subscribed {member.email} to mailing list {self.settings.mailchimp_list_id}")
