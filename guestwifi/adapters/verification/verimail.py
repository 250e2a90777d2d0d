"""
Verimail adapter - Implements EmailVerifier protocol.

Asks the Verimail API whether an address can receive mail. Every
failure mode (no API key, network error, timeout, non-2xx status,
undecodable body) is reported as an EmailVerification with result
"error" instead of raising, so the caller alone decides whether a
failed lookup blocks registration.
"""

import logging

import requests

from guestwifi.domain.ports import EmailVerification

logger = logging.getLogger(__name__)

DEFAULT_VERIMAIL_URL = "https://api.verimail.io/v3/verify"
SERVICE_UNAVAILABLE = "Email verification service unavailable"
KEY_NOT_CONFIGURED = "Verimail API key not configured"


class VerimailEmailVerifier:
    """
    Implements EmailVerifier protocol via the Verimail REST API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        api_key: str | None,
        url: str = DEFAULT_VERIMAIL_URL,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def verify(self, email: str) -> EmailVerification:
        """
        Look up deliverability for one address.

        Args:
            email: Address to check

        Returns:
            EmailVerification; result "error" when the lookup itself failed
        """
        if not self._api_key:
            return _error(KEY_NOT_CONFIGURED)

        try:
            resp = self._session.get(
                self._url,
                params={"email": email, "key": self._api_key},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            # The URL carries the key, keep it out of the log line
            logger.warning("Verimail request failed: %s", type(e).__name__)
            return _error(SERVICE_UNAVAILABLE)

        try:
            data = resp.json()
        except ValueError:
            logger.warning("Verimail returned a non-JSON body (status %s)", resp.status_code)
            return _error(SERVICE_UNAVAILABLE)

        if not isinstance(data, dict):
            logger.warning("Verimail returned an unexpected payload type: %s", type(data).__name__)
            return _error(SERVICE_UNAVAILABLE)

        error_message = None
        if not resp.ok:
            error_message = data.get("message") or "Verification failed"
            logger.warning("Verimail returned status %s: %s", resp.status_code, error_message)

        return EmailVerification(
            is_valid=resp.ok and data.get("status") == "success",
            is_deliverable=data.get("deliverable") is True,
            result=str(data.get("result") or "unknown"),
            error_message=error_message,
        )


def _error(message: str) -> EmailVerification:
    return EmailVerification(
        is_valid=False,
        is_deliverable=False,
        result="error",
        error_message=message,
    )
