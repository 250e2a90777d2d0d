"""
Unit tests for API request/response models.

Tests camelCase wire names and field constraints.
"""

import pytest
from pydantic import ValidationError

from guestwifi.api.models import (
    ErrorResponse,
    NameValidationModel,
    RegisterResponse,
    ValidateNameRequest,
    ValidationErrorResponse,
    VerifyEmailResponse,
)


class TestRegisterResponse:
    def test_dumps_camel_case(self) -> None:
        response = RegisterResponse(message="WiFi access granted successfully!", guest_id="abc")
        assert response.model_dump(by_alias=True) == {
            "success": True,
            "message": "WiFi access granted successfully!",
            "guestId": "abc",
        }


class TestErrorResponses:
    def test_field_omitted_when_absent(self) -> None:
        dumped = ErrorResponse(message="Internal server error. Please try again.").model_dump(
            by_alias=True, exclude_none=True
        )
        assert dumped == {"message": "Internal server error. Please try again."}

    def test_validation_error_default_message(self) -> None:
        dumped = ValidationErrorResponse(errors={"email": "bad"}).model_dump(by_alias=True)
        assert dumped == {"message": "Validation failed", "errors": {"email": "bad"}}


class TestRequests:
    def test_name_request_accepts_camel_case(self) -> None:
        assert ValidateNameRequest.model_validate({"fullName": "Salma Tazi"}).full_name == "Salma Tazi"

    def test_name_request_allows_missing_name(self) -> None:
        assert ValidateNameRequest.model_validate({}).full_name is None


class TestVerificationModels:
    def test_verify_email_response_aliases(self) -> None:
        dumped = VerifyEmailResponse(
            email="guest@example.com",
            is_valid=True,
            is_deliverable=False,
            result="risky",
            message="Email may not be deliverable",
        ).model_dump(by_alias=True)
        assert dumped["isValid"] is True
        assert dumped["isDeliverable"] is False

    @pytest.mark.parametrize("confidence", [-0.1, 1.1])
    def test_confidence_bounds(self, confidence: float) -> None:
        with pytest.raises(ValidationError):
            NameValidationModel(valid=True, confidence=confidence)
