"""Declarative validation of the contact form fields."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import email_validator
from markupsafe import escape


Normalizer = Callable[[str], str]
Check = tuple[Callable[[str], bool], str]

EXTRA_ESCAPES = str.maketrans({"/": "&#x2F;", "\\": "&#x5C;", "`": "&#96;"})

GMAIL_DOMAINS = {"gmail.com", "googlemail.com"}
SUBADDRESS_DOMAINS = {
    "hotmail.com",
    "live.com",
    "outlook.com",
    "yahoo.com",
    "ymail.com",
    "icloud.com",
    "me.com",
    "mac.com",
}


class InvalidEmailError(ValueError):
    pass


def trim(value: str) -> str:
    return value.strip()


def escape_markup(value: str) -> str:
    """Escape markup the way express-validator's `escape()` does (`& < > " ' / \\` and backtick)."""

    escaped = str(escape(value)).translate(EXTRA_ESCAPES)
    return escaped.replace("&#34;", "&quot;").replace("&#39;", "&#x27;")


def normalize_email(value: str) -> str:
    """
    Return the canonical form of an email address.

    The address is lowercased, gmail addresses lose their dots and `+tag` (and `googlemail.com` becomes `gmail.com`)
    and a few other providers lose their `+tag` subaddress.
    """

    try:
        result = email_validator.validate_email(value, check_deliverability=False)
    except email_validator.EmailNotValidError as e:
        raise InvalidEmailError(str(e)) from e

    local, domain = result.local_part.lower(), result.domain.lower()
    if domain in GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "")
        domain = "gmail.com"
    elif domain in SUBADDRESS_DOMAINS:
        local = local.split("+", 1)[0]
    if not local:
        raise InvalidEmailError("The local part of the address is empty")

    return f"{local}@{domain}"


@dataclass(frozen=True)
class FieldRule:
    field: str
    normalizers: tuple[Normalizer, ...]
    checks: tuple[Check, ...]

    def apply(self, raw: str) -> tuple[str, str | None]:
        """Normalize `raw` and return the value together with the message of the first failing check."""

        value = raw
        for normalize in self.normalizers:
            try:
                value = normalize(value)
            except ValueError:
                # values that cannot be normalized fail with the last message of the rule
                return value, self.checks[-1][1]
        for predicate, message in self.checks:
            if not predicate(value):
                return value, message
        return value, None


@dataclass
class ValidationResult:
    values: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


def not_empty(value: str) -> bool:
    return bool(value)


def min_length(n: int) -> Callable[[str], bool]:
    return lambda value: len(value) >= n


CONTACT_FORM_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "first_name",
        (trim, escape_markup),
        (
            (not_empty, "First name is required"),
            (min_length(3), "First name must be at least 3 characters long"),
        ),
    ),
    FieldRule(
        "last_name",
        (trim, escape_markup),
        (
            (not_empty, "Last name is required"),
            (min_length(2), "Last name must be at least 2 characters long"),
        ),
    ),
    FieldRule("email", (trim, normalize_email), ((not_empty, "Email is not valid"),)),
    FieldRule("message", (trim, escape_markup), ((not_empty, "Message is required"),)),
)


def validate_contact_form(
    data: Mapping[str, Any], rules: tuple[FieldRule, ...] = CONTACT_FORM_RULES
) -> ValidationResult:
    """Apply every rule and collect the first error of each field."""

    result = ValidationResult()
    for rule in rules:
        raw = data.get(rule.field)
        value, error = rule.apply(raw if isinstance(raw, str) else "")
        result.values[rule.field] = value
        if error is not None:
            result.errors[rule.field] = error
    return result
