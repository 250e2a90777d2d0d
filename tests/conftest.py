"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Valid signup form payloads
- Settings isolated from the developer's environment and .env file
"""

from collections.abc import Callable
from typing import Any

import pytest

from guestwifi.config.settings import Settings

VALID_PAYLOAD: dict[str, Any] = {
    "title": "Mr",
    "fullName": "Youssef Amrani",
    "email": "youssef.amrani@example.com",
    "accessCode": "123456",
    "whatsappNumber": "+212612345678",
    "acceptedTerms": True,
    "language": "en",
}


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Build a valid signup payload, with per-test overrides."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload = dict(VALID_PAYLOAD)
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def payload(make_payload: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    return make_payload()


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings that ignore .env and carry no real API keys."""

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "environment": "test",
            "verimail_api_key": None,
            "openai_api_key": None,
            "email_verification_mode": "disabled",
            "name_validation_enabled": False,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make
