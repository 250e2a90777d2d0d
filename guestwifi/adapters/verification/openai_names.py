"""
OpenAI name adapter - Implements NameValidator protocol.

Asks a chat-completions model whether a full name looks like a real
person's name, with a prompt tuned for the international guests of a
hotel in Marrakech. The check is advisory: any failure returns a
permissive fallback so a provider outage never blocks a signup.

Results are cached per normalized name (trimmed, lower-cased) for a
short window, so a guest resubmitting the form does not trigger a new
model call. The cache drops expired entries and is capped in size.
"""

import json
import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable

import requests

from guestwifi.domain.ports import NameValidation

logger = logging.getLogger(__name__)

DEFAULT_OPENAI_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_CACHE_TTL_SECONDS = 5 * 60
DEFAULT_MAX_CACHE_ENTRIES = 1024
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 50

SYSTEM_PROMPT = (
    "You are a name validation expert for a hospitality business in Morocco. "
    "Be culturally sensitive and inclusive while detecting obvious fake or test entries."
)

USER_PROMPT = """Analyze if "{name}" is a plausible human full name. Consider:
- International naming conventions (Arabic, Berber, French, English, Spanish, etc.)
- Common name formats and structures
- Detect obvious fake entries, test data, or nonsense
- Cultural diversity in Morocco/Marrakech context

Respond in JSON format:
{{
  "valid": boolean,
  "confidence": number (0-1),
  "suggestion": "corrected name if typo detected" or null,
  "issues": ["list of specific issues"] or []
}}"""


def unavailable_fallback() -> NameValidation:
    return NameValidation(
        valid=True,
        confidence=0.5,
        issues=("AI validation temporarily unavailable",),
    )


class OpenAINameValidator:
    """
    Implements NameValidator protocol via the OpenAI chat-completions API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o-mini",
        url: str = DEFAULT_OPENAI_URL,
        timeout: float = 5.0,
        cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        session: requests.Session | None = None,
        clock: Callable[[], float] = time.monotonic,
        max_cache_entries: int = DEFAULT_MAX_CACHE_ENTRIES,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._url = url
        self._timeout = timeout
        self._cache_ttl = cache_ttl_seconds
        self._max_cache_entries = max_cache_entries
        self._session = session or requests.Session()
        self._clock = clock
        # Oldest entry first
        self._cache: OrderedDict[str, tuple[NameValidation, float]] = OrderedDict()
        self._cache_lock = threading.Lock()

    def validate(self, full_name: str) -> NameValidation:
        """Validate a name, serving repeated names from the cache."""
        key = full_name.strip().lower()
        now = self._clock()

        with self._cache_lock:
            cached = self._cache.get(key)
            if cached is not None and now - cached[1] < self._cache_ttl:
                return cached[0]

        result = self._validate_uncached(full_name)

        with self._cache_lock:
            self._cache.pop(key, None)
            self._cache[key] = (result, now)
            self._evict(now)
        return result

    def _evict(self, now: float) -> None:
        """Drop expired entries, then the oldest ones past the size cap."""
        while self._cache:
            _, (_, stored_at) = next(iter(self._cache.items()))
            if now - stored_at < self._cache_ttl:
                break
            self._cache.popitem(last=False)
        while len(self._cache) > self._max_cache_entries:
            self._cache.popitem(last=False)

    def _validate_uncached(self, full_name: str) -> NameValidation:
        if len(full_name) < MIN_NAME_LENGTH or len(full_name) > MAX_NAME_LENGTH:
            return NameValidation(
                valid=False,
                confidence=0.9,
                issues=("Name length is outside normal range",),
            )

        if not self._api_key:
            logger.debug("OpenAI API key not configured, skipping name validation")
            return unavailable_fallback()

        try:
            content = self._ask_model(full_name)
            return _parse_verdict(content)
        except (
            requests.RequestException,
            ValueError,
            KeyError,
            IndexError,
            TypeError,
            OverflowError,
        ) as e:
            logger.warning("OpenAI name validation failed: %s", e)
            return unavailable_fallback()

    def _ask_model(self, full_name: str) -> str:
        resp = self._session.post(
            self._url,
            headers={"Authorization": f"Bearer {self._api_key}"},
            json={
                "model": self._model,
                "messages": [
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": USER_PROMPT.format(name=full_name)},
                ],
                "response_format": {"type": "json_object"},
                "max_tokens": 200,
                "temperature": 0.1,
            },
            timeout=self._timeout,
        )
        resp.raise_for_status()
        return resp.json()["choices"][0]["message"]["content"] or "{}"


def _parse_verdict(content: str) -> NameValidation:
    """
    Turn the model's JSON reply into a NameValidation.

    Missing fields default to a permissive verdict; confidence is
    clamped to [0, 1].

    Raises:
        ValueError: If the reply is not a JSON object
    """
    verdict = json.loads(content)
    if not isinstance(verdict, dict):
        raise ValueError("Model reply is not a JSON object")

    valid = verdict.get("valid")
    confidence = verdict.get("confidence")
    if not isinstance(confidence, (int, float)) or isinstance(confidence, bool):
        confidence = 0.5
    issues = verdict.get("issues")
    suggestion = verdict.get("suggestion")

    return NameValidation(
        valid=valid if isinstance(valid, bool) else True,
        confidence=_clamp_confidence(confidence),
        suggestion=str(suggestion) if suggestion else None,
        issues=tuple(str(issue) for issue in issues) if isinstance(issues, list) else (),
    )


def _clamp_confidence(confidence: int | float) -> float:
    # JSON integers are unbounded and may not fit in a float
    if isinstance(confidence, int) and not 0 <= confidence <= 1:
        return 0.0 if confidence < 0 else 1.0
    return max(0.0, min(1.0, float(confidence)))
