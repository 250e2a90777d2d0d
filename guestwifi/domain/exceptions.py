"""
Domain exceptions - Semantic error types for guest registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class RegistrationValidationError(RegistrationError):
    """One or more form fields failed their format rules."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("Validation failed")
        self.errors = errors


class RegistrationRejected(RegistrationError):
    """A well-formed registration was refused by a business rule."""

    field: str = ""
    default_message: str = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidAccessCode(RegistrationRejected):
    """Access code is not accepted by the configured policy."""

    field = "accessCode"
    default_message = "Invalid access code. Please check with reception."


class EmailNotDeliverable(RegistrationRejected):
    """Email address failed the deliverability check."""

    field = "email"
    default_message = "Please enter a valid email address that can receive emails."


class EmailAlreadyRegistered(RegistrationRejected):
    """A guest with this email address already exists."""

    field = "email"
    default_message = "This email is already registered. You should already have WiFi access."


class RegistrationUnavailable(RegistrationError):
    """Unexpected internal fault; details are logged, never returned."""

    pass
