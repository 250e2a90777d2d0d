"""
Permissive verifiers - Always-accepting stand-ins for the upstream checks.

Wired in when a check is disabled by configuration, and handy in tests
that exercise the registration flow without network access.
"""

import logging

from guestwifi.domain.ports import EmailVerification, NameValidation

logger = logging.getLogger(__name__)


class PermissiveEmailVerifier:
    """Implements EmailVerifier protocol; every address is deliverable."""

    def verify(self, email: str) -> EmailVerification:
        logger.debug("Email verification disabled, accepting address")
        return EmailVerification(is_valid=True, is_deliverable=True, result="skipped")


class PermissiveNameValidator:
    """Implements NameValidator protocol; every name is plausible."""

    def validate(self, full_name: str) -> NameValidation:
        return NameValidation(valid=True, confidence=0.5, issues=("Name validation disabled",))
