"""
Registration domain service - Guest signup acceptance protocol.

This module contains the business logic that turns a raw signup form
into a stored Guest, or into exactly one rejection.

Acceptance Protocol (strictly ordered, stops at first rejection)
================================================================

1. Shape validation        -> RegistrationValidationError (all bad fields)
2. Access code acceptance  -> InvalidAccessCode
3. Name plausibility       -> advisory, logged only
4. Email deliverability    -> EmailNotDeliverable (enforce mode only)
5. Duplicate email         -> EmailAlreadyRegistered
6. Persist                 -> Guest

Step 6 uses the repository's atomic insert-if-absent, so two concurrent
signups for the same email cannot both be stored. The loser of that race
gets the same EmailAlreadyRegistered as step 5.

Anything else that goes wrong is logged here and surfaced as
RegistrationUnavailable, which carries no internal detail.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import (
    EmailAlreadyRegistered,
    EmailNotDeliverable,
    InvalidAccessCode,
    RegistrationError,
    RegistrationUnavailable,
)
from .ports import (
    AccessCodePolicy,
    EmailVerifier,
    Guest,
    GuestRegistration,
    GuestRepository,
    NameValidator,
)
from .validators import validate_registration

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for guest WiFi registration.

    Orchestrates validators, verification clients and the guest store
    into the accept/reject decision for one signup attempt.
    """

    repository: GuestRepository
    access_code_policy: AccessCodePolicy
    email_verifier: EmailVerifier
    name_validator: NameValidator | None = None
    enforce_email_verification: bool = True
    name_charset: str = "strict"
    allow_00_phone_prefix: bool = False

    def register(self, payload: Mapping[str, Any]) -> Guest:
        """
        Run the acceptance protocol for one signup form.

        Args:
            payload: Decoded JSON body with camelCase form fields

        Returns:
            The stored Guest

        Raises:
            RegistrationValidationError: Field format errors
            InvalidAccessCode: Code refused by the access code policy
            EmailNotDeliverable: Deliverability check failed (enforce mode)
            EmailAlreadyRegistered: Email already has a guest
            RegistrationUnavailable: Unexpected internal fault
        """
        try:
            return self._register(payload)
        except RegistrationError:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure during guest registration")
            raise RegistrationUnavailable() from exc

    def is_access_code_accepted(self, code: str) -> bool:
        return self.access_code_policy.is_accepted(code)

    def _register(self, payload: Mapping[str, Any]) -> Guest:
        registration = validate_registration(
            payload,
            name_charset=self.name_charset,
            allow_00_phone_prefix=self.allow_00_phone_prefix,
        )

        if not self.is_access_code_accepted(registration.access_code):
            logger.info("Registration rejected: access code not accepted")
            raise InvalidAccessCode()

        self._check_name(registration)
        self._check_email(registration)

        if self.repository.find_by_email(registration.email) is not None:
            logger.info("Registration rejected: email already registered")
            raise EmailAlreadyRegistered()

        guest = self.repository.add_if_email_absent(registration)
        if guest is None:
            logger.info("Registration rejected: email registered concurrently")
            raise EmailAlreadyRegistered()

        logger.info("Guest registered: %s", guest.id)
        return guest

    def _check_name(self, registration: GuestRegistration) -> None:
        """Advisory only - a doubtful name is logged, never rejected."""
        if self.name_validator is None:
            return
        try:
            result = self.name_validator.validate(registration.full_name)
        except Exception:
            logger.exception("Name validation failed, continuing without it")
            return
        if not result.valid:
            logger.info(
                "Name flagged as implausible (confidence %.2f): %s",
                result.confidence,
                ", ".join(result.issues) or "no details",
            )

    def _check_email(self, registration: GuestRegistration) -> None:
        verification = self.email_verifier.verify(registration.email)
        if verification.accepted:
            return

        if not self.enforce_email_verification:
            logger.info(
                "Email deliverability check failed (advisory mode, result=%s)",
                verification.result,
            )
            return

        logger.info("Registration rejected: email not deliverable (result=%s)", verification.result)
        raise EmailNotDeliverable(verification.error_message)
