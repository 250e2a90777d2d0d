"""
Field validators - Pure format rules for the signup form.

Each rule inspects one raw field value and returns a FieldCheck.
Rules within a field run in a fixed order and stop at the first
failure, so every field reports at most one message. Fields are
checked independently and all failures are collected, mirroring how
the form shows several errors at once.

Nothing here performs I/O.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .exceptions import RegistrationValidationError
from .ports import GuestRegistration, Title

FULL_NAME_MIN_LENGTH = 4
FULL_NAME_MAX_LENGTH = 30
ACCESS_CODE_MIN_LENGTH = 6
ACCESS_CODE_MAX_LENGTH = 9

_ACCESS_CODE_DIGITS = re.compile(r"[0-9]+")
_STRICT_NAME = re.compile(r"[A-Za-z\s]+", re.ASCII)
_INTERNATIONAL_NAME_PUNCTUATION = frozenset(" -'")
_PHONE_PLUS = re.compile(r"\+[1-9][0-9]{1,14}")
_PHONE_DOUBLE_ZERO = re.compile(r"00[1-9][0-9]{1,14}")

EMAIL_MESSAGE = "Please enter a valid email address"
PHONE_MESSAGE = "Please enter a valid international WhatsApp number (e.g., +1234567890)"


@dataclass(frozen=True)
class FieldCheck:
    """Result of one field rule: ok, or an error message."""

    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


OK = FieldCheck()


def _fail(message: str) -> FieldCheck:
    return FieldCheck(error=message)


def check_title(value: Any) -> FieldCheck:
    if not isinstance(value, str) or value not in {title.value for title in Title}:
        return _fail("Please select Mr or Mrs")
    return OK


def check_full_name(value: Any, charset: str = "strict") -> FieldCheck:
    """
    Full name: 4-30 characters, letters and spaces.

    The "international" charset also accepts accented letters,
    hyphens and apostrophes.
    """
    if not isinstance(value, str) or not value:
        return _fail("Full name is required")
    if len(value) < FULL_NAME_MIN_LENGTH:
        return _fail(f"Full name must be at least {FULL_NAME_MIN_LENGTH} characters")
    if len(value) > FULL_NAME_MAX_LENGTH:
        return _fail(f"Full name must be maximum {FULL_NAME_MAX_LENGTH} characters")

    if charset == "international":
        allowed = all(ch.isalpha() or ch in _INTERNATIONAL_NAME_PUNCTUATION for ch in value)
        if not allowed or not any(ch.isalpha() for ch in value):
            return _fail("Full name must contain only letters, spaces, hyphens and apostrophes")
    elif not _STRICT_NAME.fullmatch(value) or not any(ch.isalpha() for ch in value):
        return _fail("Full name must contain only alphabetic characters and spaces")
    return OK


def check_email(value: Any) -> FieldCheck:
    """Syntax only; deliverability is a separate upstream check."""
    if not isinstance(value, str) or not value.strip():
        return _fail(EMAIL_MESSAGE)
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return _fail(EMAIL_MESSAGE)
    return OK


def check_access_code(value: Any) -> FieldCheck:
    """Access code: ASCII digits first, then the 6-9 length window."""
    if not isinstance(value, str) or not value:
        return _fail("Access code is required")
    if not _ACCESS_CODE_DIGITS.fullmatch(value):
        return _fail("Access code must contain only numbers")
    if len(value) < ACCESS_CODE_MIN_LENGTH:
        return _fail(f"Access code must be at least {ACCESS_CODE_MIN_LENGTH} digits")
    if len(value) > ACCESS_CODE_MAX_LENGTH:
        return _fail(f"Access code must be maximum {ACCESS_CODE_MAX_LENGTH} digits")
    return OK


def check_whatsapp_number(value: Any, allow_00_prefix: bool = False) -> FieldCheck:
    if not isinstance(value, str):
        return _fail(PHONE_MESSAGE)
    if _PHONE_PLUS.fullmatch(value):
        return OK
    if allow_00_prefix and _PHONE_DOUBLE_ZERO.fullmatch(value):
        return OK
    return _fail(PHONE_MESSAGE)


def check_accepted_terms(value: Any) -> FieldCheck:
    if value is not True:
        return _fail("You must accept the terms and conditions")
    return OK


def check_language(value: Any) -> FieldCheck:
    if not isinstance(value, str) or not value:
        return _fail("Language must be a non-empty string")
    return OK


def normalize_email(email: str) -> str:
    """Strip whitespace and lowercase for storage and lookup."""
    return email.strip().lower()


def validate_registration(
    payload: Any,
    *,
    name_charset: str = "strict",
    allow_00_phone_prefix: bool = False,
) -> GuestRegistration:
    """
    Validate a raw form payload and build a GuestRegistration.

    Args:
        payload: Decoded JSON body using the form's camelCase keys
        name_charset: "strict" or "international" full-name policy
        allow_00_phone_prefix: Also accept "00" in place of "+"

    Returns:
        GuestRegistration with a normalized email

    Raises:
        RegistrationValidationError: With a field -> message mapping
            holding every failing field
    """
    if not isinstance(payload, Mapping):
        raise RegistrationValidationError({"body": "Request body must be a JSON object"})

    language = payload.get("language", "en")
    rules: dict[str, Callable[[], FieldCheck]] = {
        "title": lambda: check_title(payload.get("title")),
        "fullName": lambda: check_full_name(payload.get("fullName"), name_charset),
        "email": lambda: check_email(payload.get("email")),
        "accessCode": lambda: check_access_code(payload.get("accessCode")),
        "whatsappNumber": lambda: check_whatsapp_number(
            payload.get("whatsappNumber"), allow_00_phone_prefix
        ),
        "acceptedTerms": lambda: check_accepted_terms(payload.get("acceptedTerms")),
        "language": lambda: check_language(language),
    }

    errors: dict[str, str] = {}
    for field_name, rule in rules.items():
        check = rule()
        if not check.ok:
            errors[field_name] = check.error

    if errors:
        raise RegistrationValidationError(errors)

    return GuestRegistration(
        title=Title(payload["title"]),
        full_name=payload["fullName"],
        email=normalize_email(payload["email"]),
        access_code=payload["accessCode"],
        whatsapp_number=payload["whatsappNumber"],
        accepted_terms=True,
        language=language,
    )
