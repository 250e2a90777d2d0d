"""
API routes - Guest WiFi registration endpoints.

Defines the REST endpoints used by the captive-portal signup form:
- POST /api/wifi/register (alias POST /api/guests) - Register a guest
- POST /api/verify-email - Deliverability hint while typing
- POST /api/validate/name - Name plausibility hint while typing
- GET  /api/wifi/access-codes - Diagnostic code listing (non-production)

Handlers that call out to third-party services are plain functions so
FastAPI runs them in its thread pool; a slow upstream only holds up the
request that is waiting on it.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from guestwifi.api.dependencies import (
    get_access_code_policy,
    get_app_settings,
    get_email_verifier,
    get_name_validator,
    get_registration_service,
)
from guestwifi.api.models import (
    AccessCodesResponse,
    ErrorResponse,
    NameValidationModel,
    RegisterResponse,
    ValidateNameRequest,
    ValidateNameResponse,
    ValidationErrorResponse,
    VerifyEmailErrorResponse,
    VerifyEmailRequest,
    VerifyEmailResponse,
)
from guestwifi.config.settings import Settings
from guestwifi.domain.exceptions import (
    RegistrationRejected,
    RegistrationUnavailable,
    RegistrationValidationError,
)
from guestwifi.domain.ports import AccessCodePolicy, EmailVerifier, NameValidator
from guestwifi.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["wifi"])

INTERNAL_ERROR_MESSAGE = "Internal server error. Please try again."


def error_response(status_code: int, model: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(by_alias=True, exclude_none=True),
    )


@router.post(
    "/wifi/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid form fields, access code or email"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Register a guest for WiFi access",
    description="Validate the signup form, check the access code and email, "
    "and store the guest.",
)
@router.post(
    "/guests",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def register(
    payload: Any = Body(...),
    service: RegistrationService = Depends(get_registration_service),
) -> Any:
    """
    Register a guest and grant WiFi access.

    - **title**: "Mr" or "Mrs"
    - **fullName**: 4-30 letters and spaces
    - **email**: Deliverable email address, not yet registered
    - **accessCode**: 6-9 digit code from reception
    - **whatsappNumber**: International number, e.g. +212612345678
    - **acceptedTerms**: Must be true
    - **language**: UI language, defaults to "en"
    """
    try:
        guest = service.register(payload)
    except RegistrationValidationError as e:
        return error_response(
            status.HTTP_400_BAD_REQUEST, ValidationErrorResponse(errors=e.errors)
        )
    except RegistrationRejected as e:
        return error_response(
            status.HTTP_400_BAD_REQUEST, ErrorResponse(message=e.message, field=e.field)
        )
    except RegistrationUnavailable:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(message=INTERNAL_ERROR_MESSAGE)
        )

    return RegisterResponse(message="WiFi access granted successfully!", guest_id=guest.id)


@router.post(
    "/verify-email",
    response_model=VerifyEmailResponse,
    responses={400: {"model": VerifyEmailErrorResponse, "description": "Email missing"}},
    summary="Check email deliverability",
)
def verify_email(
    request_data: VerifyEmailRequest,
    verifier: EmailVerifier = Depends(get_email_verifier),
) -> Any:
    """Advisory deliverability lookup used by the form while the guest types."""
    if not isinstance(request_data.email, str) or not request_data.email:
        return error_response(
            status.HTTP_400_BAD_REQUEST, VerifyEmailErrorResponse(message="Email is required")
        )

    verification = verifier.verify(request_data.email)
    if verification.error_message:
        message = verification.error_message
    elif verification.is_deliverable:
        message = "Email is valid and deliverable"
    else:
        message = "Email may not be deliverable"

    return VerifyEmailResponse(
        email=request_data.email,
        is_valid=verification.is_valid,
        is_deliverable=verification.is_deliverable,
        result=verification.result,
        message=message,
    )


@router.post(
    "/validate/name",
    response_model=ValidateNameResponse,
    responses={400: {"model": ErrorResponse, "description": "Full name missing"}},
    summary="Check full name plausibility",
)
def validate_name(
    request_data: ValidateNameRequest,
    validator: NameValidator = Depends(get_name_validator),
) -> Any:
    """Advisory name check; never blocks registration."""
    if not request_data.full_name:
        return error_response(
            status.HTTP_400_BAD_REQUEST, ErrorResponse(message="Full name is required")
        )

    result = validator.validate(request_data.full_name)
    return ValidateNameResponse(
        validation=NameValidationModel(
            valid=result.valid,
            confidence=result.confidence,
            suggestion=result.suggestion,
            issues=list(result.issues),
        )
    )


@router.get(
    "/wifi/access-codes",
    response_model=AccessCodesResponse,
    responses={404: {"model": ErrorResponse, "description": "Listing not available"}},
    summary="List accepted access codes (diagnostics)",
)
async def list_access_codes(
    settings: Settings = Depends(get_app_settings),
    policy: AccessCodePolicy = Depends(get_access_code_policy),
) -> Any:
    """
    Diagnostic listing of the allow-listed access codes.

    Only available with the allowlist policy outside production.
    """
    codes = policy.known_codes()
    if codes is None or settings.is_production:
        return error_response(status.HTTP_404_NOT_FOUND, ErrorResponse(message="Not found"))
    return AccessCodesResponse(access_codes=codes)
