"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the value types that cross the domain boundary and
the interfaces (ports) that the domain requires from infrastructure.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class Title(str, Enum):
    """Guest salutation offered by the signup form."""

    MR = "Mr"
    MRS = "Mrs"


@dataclass(frozen=True)
class GuestRegistration:
    """A registration that passed every field rule but is not yet stored."""

    title: Title
    full_name: str
    email: str
    access_code: str
    whatsapp_number: str
    accepted_terms: bool
    language: str = "en"


@dataclass(frozen=True)
class Guest:
    """
    A stored guest registration.

    Immutable once created; the store offers no update or delete.
    """

    id: str
    created_at: datetime
    title: Title
    full_name: str
    email: str
    access_code: str
    whatsapp_number: str
    accepted_terms: bool
    language: str


@dataclass(frozen=True)
class EmailVerification:
    """Outcome of a deliverability lookup."""

    is_valid: bool
    is_deliverable: bool
    result: str
    error_message: str | None = None

    @property
    def accepted(self) -> bool:
        return self.is_valid and self.is_deliverable


@dataclass(frozen=True)
class NameValidation:
    """Outcome of a name plausibility check. Advisory only."""

    valid: bool
    confidence: float
    suggestion: str | None = None
    issues: tuple[str, ...] = ()


class GuestRepository(Protocol):
    """Port interface for guest persistence."""

    def create(self, registration: GuestRegistration) -> Guest:
        """
        Store a registration unconditionally.

        Generates a unique id and creation timestamp. Does not check
        for duplicate emails.
        """
        ...

    def add_if_email_absent(self, registration: GuestRegistration) -> Guest | None:
        """
        Atomically store a registration unless its email is already taken.

        Returns:
            The stored Guest, or None if a guest with that email exists
        """
        ...

    def find_by_email(self, email: str) -> Guest | None:
        """Return the guest registered with this email, or None."""
        ...

    def find_by_id(self, guest_id: str) -> Guest | None:
        """Return the guest with this id, or None."""
        ...


class AccessCodePolicy(Protocol):
    """Port interface for deciding which access codes open the network."""

    def is_accepted(self, code: str) -> bool:
        ...

    def known_codes(self) -> list[str] | None:
        """Codes this policy accepts, or None when it only checks format."""
        ...


class EmailVerifier(Protocol):
    """Port interface for email deliverability checks."""

    def verify(self, email: str) -> EmailVerification:
        """
        Check whether an address can receive mail.

        Implementations never raise; upstream failures are reported as
        an EmailVerification with result "error".
        """
        ...


class NameValidator(Protocol):
    """Port interface for name plausibility checks."""

    def validate(self, full_name: str) -> NameValidation:
        """
        Judge whether a full name looks like a real person's name.

        Implementations never raise; upstream failures fall back to a
        permissive result.
        """
        ...
