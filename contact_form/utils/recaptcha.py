import asyncio
from dataclasses import dataclass
from typing import Any, Protocol

import aiohttp

from ..exceptions.recaptcha import MissingRecaptchaTokenError, RecaptchaRejectedError, RecaptchaVerificationError
from ..logger import get_logger
from ..settings import Settings


logger = get_logger(__name__)

RECAPTCHA_FIELD = "g-recaptcha-response"


@dataclass(frozen=True)
class VerificationOutcome:
    success: bool
    score: float
    action: str

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "VerificationOutcome":
        return cls(
            success=data.get("success") is True,
            score=float(data.get("score") or 0.0),
            action=str(data.get("action") or ""),
        )


class CaptchaVerifier(Protocol):
    async def verify(self, token: str) -> VerificationOutcome:
        ...


class RecaptchaVerifier:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    async def verify(self, token: str) -> VerificationOutcome:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.settings.recaptcha_verify_url,
                    data={"secret": self.settings.recaptcha_secret_key, "response": token},
                ) as resp:
                    if resp.status != 200:
                        logger.error(f"Recaptcha verification returned status {resp.status}")
                        raise RecaptchaVerificationError

                    data = await resp.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.exception(f"Error verifying recaptcha: {e}")
            raise RecaptchaVerificationError from e

        logger.debug(f"Recaptcha response: {data}")
        if not isinstance(data, dict):
            raise RecaptchaVerificationError

        try:
            return VerificationOutcome.from_response(data)
        except (TypeError, ValueError) as e:
            raise RecaptchaVerificationError from e


async def check_recaptcha(verifier: CaptchaVerifier, token: str | None, settings: Settings) -> VerificationOutcome:
    """
    Verify a recaptcha token and enforce the acceptance policy.

    Raises `MissingRecaptchaTokenError` without contacting the verifier if no token was submitted,
    `RecaptchaVerificationError` if the verifier could not be queried and `RecaptchaRejectedError` if the outcome
    was unsuccessful, scored below `recaptcha_min_score` or was issued for another action.
    """

    if not token:
        raise MissingRecaptchaTokenError

    outcome = await verifier.verify(token)
    if (
        not outcome.success
        or outcome.score < settings.recaptcha_min_score
        or outcome.action != settings.recaptcha_action
    ):
        logger.info(f"Recaptcha rejected (score={outcome.score}, action={outcome.action!r})")
        raise RecaptchaRejectedError

    return outcome
