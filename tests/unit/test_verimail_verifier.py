"""
Unit tests for VerimailEmailVerifier adapter.

Tests verify the adapter maps Verimail responses onto EmailVerification
and degrades to an "error" result instead of raising.
"""

import logging
from unittest.mock import MagicMock

import pytest
import requests

from guestwifi.adapters.verification.verimail import (
    KEY_NOT_CONFIGURED,
    SERVICE_UNAVAILABLE,
    VerimailEmailVerifier,
)


def fake_response(status_code: int = 200, body: object = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body if body is not None else {}
    return resp


def verifier_with(resp: MagicMock | None = None, error: Exception | None = None):
    session = MagicMock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = resp
    return VerimailEmailVerifier(api_key="test-key", timeout=2.5, session=session), session


class TestRequest:
    def test_sends_email_and_key_with_timeout(self) -> None:
        verifier, session = verifier_with(
            fake_response(body={"status": "success", "deliverable": True, "result": "deliverable"})
        )

        verifier.verify("guest@example.com")

        session.get.assert_called_once_with(
            "https://api.verimail.io/v3/verify",
            params={"email": "guest@example.com", "key": "test-key"},
            timeout=2.5,
        )

    def test_missing_api_key_makes_no_call(self) -> None:
        session = MagicMock()
        verifier = VerimailEmailVerifier(api_key=None, session=session)

        result = verifier.verify("guest@example.com")

        session.get.assert_not_called()
        assert result.is_valid is False
        assert result.is_deliverable is False
        assert result.result == "error"
        assert result.error_message == KEY_NOT_CONFIGURED


class TestResponseMapping:
    def test_deliverable(self) -> None:
        verifier, _ = verifier_with(
            fake_response(body={"status": "success", "deliverable": True, "result": "deliverable"})
        )

        result = verifier.verify("guest@example.com")

        assert result.is_valid is True
        assert result.is_deliverable is True
        assert result.result == "deliverable"
        assert result.error_message is None
        assert result.accepted

    def test_undeliverable(self) -> None:
        verifier, _ = verifier_with(
            fake_response(body={"status": "success", "deliverable": False, "result": "undeliverable"})
        )

        result = verifier.verify("ghost@example.com")

        assert result.is_valid is True
        assert result.is_deliverable is False
        assert not result.accepted

    def test_deliverable_must_be_true_boolean(self) -> None:
        verifier, _ = verifier_with(
            fake_response(body={"status": "success", "deliverable": "yes"})
        )
        assert verifier.verify("guest@example.com").is_deliverable is False

    def test_missing_result_is_unknown(self) -> None:
        verifier, _ = verifier_with(fake_response(body={"status": "success"}))
        assert verifier.verify("guest@example.com").result == "unknown"

    def test_http_error_uses_service_message(self) -> None:
        verifier, _ = verifier_with(
            fake_response(status_code=401, body={"status": "error", "message": "Invalid API key"})
        )

        result = verifier.verify("guest@example.com")

        assert result.is_valid is False
        assert result.error_message == "Invalid API key"

    def test_http_error_without_message(self) -> None:
        verifier, _ = verifier_with(fake_response(status_code=500, body={}))
        assert verifier.verify("guest@example.com").error_message == "Verification failed"


class TestFailures:
    @pytest.mark.parametrize(
        "error",
        [
            requests.ConnectionError("connection refused"),
            requests.Timeout("timed out"),
        ],
    )
    def test_network_failure_is_service_unavailable(self, error: Exception) -> None:
        verifier, _ = verifier_with(error=error)

        result = verifier.verify("guest@example.com")

        assert result.is_valid is False
        assert result.is_deliverable is False
        assert result.result == "error"
        assert result.error_message == SERVICE_UNAVAILABLE

    def test_non_json_body_is_service_unavailable(self) -> None:
        verifier, _ = verifier_with(fake_response(status_code=502, body=ValueError("not json")))
        assert verifier.verify("guest@example.com").error_message == SERVICE_UNAVAILABLE

    def test_non_object_body_is_service_unavailable(self) -> None:
        verifier, _ = verifier_with(fake_response(body=["unexpected"]))
        assert verifier.verify("guest@example.com").error_message == SERVICE_UNAVAILABLE

    def test_api_key_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        verifier, _ = verifier_with(
            error=requests.ConnectionError("https://api.verimail.io/v3/verify?key=test-key")
        )

        with caplog.at_level(logging.WARNING):
            verifier.verify("guest@example.com")

        assert caplog.records
        assert all("test-key" not in r.getMessage() for r in caplog.records)
