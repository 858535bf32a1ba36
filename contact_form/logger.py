import logging

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from .settings import settings


logging_formatter = logging.Formatter("[%(asctime)s] %(levelname)s [%(name)s] %(message)s")

logging_handler = logging.StreamHandler()
logging_handler.setFormatter(logging_formatter)


def get_logger(name: str) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    logger.setLevel(settings.log_level)
    if logging_handler not in logger.handlers:
        logger.addHandler(logging_handler)
    return logger


def setup_sentry(dsn: str, name: str, version: str) -> None:
    sentry_sdk.init(
        dsn=dsn,
        attach_stacktrace=True,
        shutdown_timeout=5,
        environment=settings.sentry_environment,
        release=f"{name}@{version}",
        integrations=[LoggingIntegration(level=logging.DEBUG, event_level=logging.WARNING)],
    )
