"""
FastAPI dependencies - Dependency injection factories.

This module wires infrastructure adapters onto app.state at startup and
provides Depends() factories for injecting them into routes.
"""

import logging

from fastapi import Depends, FastAPI, Request

from guestwifi.adapters.repository.memory import InMemoryGuestRepository
from guestwifi.adapters.verification import (
    OpenAINameValidator,
    PermissiveEmailVerifier,
    PermissiveNameValidator,
    VerimailEmailVerifier,
)
from guestwifi.config.settings import Settings
from guestwifi.domain.access_codes import build_access_code_policy
from guestwifi.domain.ports import AccessCodePolicy, EmailVerifier, GuestRepository, NameValidator
from guestwifi.domain.registration import RegistrationService

logger = logging.getLogger(__name__)


def init_app_state(app: FastAPI, settings: Settings) -> None:
    """
    Build the process-wide adapters and store them in app.state.

    The guest store is created once here and shared by every request;
    each test app gets its own.
    """
    app.state.settings = settings
    app.state.guest_repository = InMemoryGuestRepository()
    app.state.access_code_policy = build_access_code_policy(
        settings.access_code_policy, settings.access_codes
    )

    if settings.email_verification_mode == "disabled":
        app.state.email_verifier = PermissiveEmailVerifier()
    else:
        if not settings.verimail_api_key:
            logger.warning("VERIMAIL_API_KEY is not set; email verification will report errors")
        app.state.email_verifier = VerimailEmailVerifier(
            api_key=settings.verimail_api_key,
            url=settings.verimail_url,
            timeout=settings.verification_timeout_seconds,
        )

    if settings.name_validation_enabled:
        app.state.name_validator = OpenAINameValidator(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            url=settings.openai_url,
            timeout=settings.verification_timeout_seconds,
            cache_ttl_seconds=settings.name_cache_ttl_seconds,
        )
    else:
        app.state.name_validator = PermissiveNameValidator()


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_repository(request: Request) -> GuestRepository:
    return request.app.state.guest_repository


def get_access_code_policy(request: Request) -> AccessCodePolicy:
    return request.app.state.access_code_policy


def get_email_verifier(request: Request) -> EmailVerifier:
    return request.app.state.email_verifier


def get_name_validator(request: Request) -> NameValidator:
    return request.app.state.name_validator


def get_registration_service(
    settings: Settings = Depends(get_app_settings),
    repository: GuestRepository = Depends(get_repository),
    access_code_policy: AccessCodePolicy = Depends(get_access_code_policy),
    email_verifier: EmailVerifier = Depends(get_email_verifier),
    name_validator: NameValidator = Depends(get_name_validator),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the guest store, access code policy and verification
    clients for the domain service.
    """
    return RegistrationService(
        repository=repository,
        access_code_policy=access_code_policy,
        email_verifier=email_verifier,
        name_validator=name_validator if settings.name_validation_enabled else None,
        enforce_email_verification=settings.email_verification_mode == "enforce",
        name_charset=settings.name_charset,
        allow_00_phone_prefix=settings.allow_00_phone_prefix,
    )
