"""
Domain layer - Pure business logic with zero framework imports.

This package contains the guest registration rules for the captive
portal. It defines its own port interfaces for infrastructure
abstraction, so the store and the verification services can be swapped
without touching the acceptance protocol.
"""

from .access_codes import (
    AllowListAccessCodePolicy,
    FormatAccessCodePolicy,
    build_access_code_policy,
)
from .exceptions import (
    EmailAlreadyRegistered,
    EmailNotDeliverable,
    InvalidAccessCode,
    RegistrationError,
    RegistrationRejected,
    RegistrationUnavailable,
    RegistrationValidationError,
)
from .ports import (
    AccessCodePolicy,
    EmailVerification,
    EmailVerifier,
    Guest,
    GuestRegistration,
    GuestRepository,
    NameValidation,
    NameValidator,
    Title,
)
from .registration import RegistrationService
from .validators import validate_registration

__all__ = [
    "AccessCodePolicy",
    "AllowListAccessCodePolicy",
    "EmailAlreadyRegistered",
    "EmailNotDeliverable",
    "EmailVerification",
    "EmailVerifier",
    "FormatAccessCodePolicy",
    "Guest",
    "GuestRegistration",
    "GuestRepository",
    "InvalidAccessCode",
    "NameValidation",
    "NameValidator",
    "RegistrationError",
    "RegistrationRejected",
    "RegistrationService",
    "RegistrationUnavailable",
    "RegistrationValidationError",
    "Title",
    "build_access_code_policy",
    "validate_registration",
]
