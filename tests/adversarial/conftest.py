"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for concurrent registration tests.
"""

import pytest

from guestwifi.adapters.repository.memory import InMemoryGuestRepository
from guestwifi.adapters.verification.permissive import PermissiveEmailVerifier
from guestwifi.domain.access_codes import FormatAccessCodePolicy
from guestwifi.domain.registration import RegistrationService

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def repository() -> InMemoryGuestRepository:
    """Fresh guest store for each test."""
    return InMemoryGuestRepository()


@pytest.fixture
def service(repository: InMemoryGuestRepository) -> RegistrationService:
    return RegistrationService(
        repository=repository,
        access_code_policy=FormatAccessCodePolicy(),
        email_verifier=PermissiveEmailVerifier(),
    )
