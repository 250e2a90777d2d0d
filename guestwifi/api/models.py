"""
API request and response models.

Pydantic models for FastAPI endpoint serialization and OpenAPI schema
generation. The signup form speaks camelCase, so fields carry aliases
and responses are rendered with by_alias.

The registration body itself is not modelled here: it is validated by
guestwifi.domain.validators so that every bad field is reported with
the form's own message.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterResponse(CamelModel):
    """Response model for a granted registration."""

    success: bool = True
    message: str
    guest_id: str


class ErrorResponse(CamelModel):
    """Error response for a single rejected field, or an opaque failure."""

    message: str
    field: str | None = None


class ValidationErrorResponse(CamelModel):
    """Error response listing every invalid form field."""

    message: str = "Validation failed"
    errors: dict[str, str]


class VerifyEmailRequest(CamelModel):
    # Any JSON value; non-strings get the "Email is required" reply
    email: Any = None


class VerifyEmailResponse(CamelModel):
    email: str
    is_valid: bool
    is_deliverable: bool
    result: str
    message: str


class VerifyEmailErrorResponse(CamelModel):
    message: str
    is_valid: bool = False


class ValidateNameRequest(CamelModel):
    full_name: str | None = None


class NameValidationModel(CamelModel):
    valid: bool
    confidence: float = Field(..., ge=0, le=1)
    suggestion: str | None = None
    issues: list[str] = []


class ValidateNameResponse(CamelModel):
    success: bool = True
    validation: NameValidationModel


class AccessCodesResponse(CamelModel):
    """Diagnostic listing of accepted access codes."""

    access_codes: list[str]
