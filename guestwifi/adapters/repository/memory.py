"""
In-memory repository adapter - Implements GuestRepository protocol.

Guests live for the lifetime of the process. There is no eviction,
no update and no delete.

Concurrency
-----------
FastAPI runs synchronous handlers in a thread pool, so several
registrations can reach the store at once. Every read and write holds
a single lock, and add_if_email_absent() performs the duplicate check
and the insert under that same lock. This is what keeps two concurrent
signups for one email from both being stored.
"""

import threading
import uuid
from dataclasses import asdict
from datetime import datetime, timezone

from guestwifi.domain.ports import Guest, GuestRegistration
from guestwifi.domain.validators import normalize_email


class InMemoryGuestRepository:
    """
    Implements GuestRepository protocol with a dict keyed by guest id.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._guests: dict[str, Guest] = {}
        self._lock = threading.Lock()

    def create(self, registration: GuestRegistration) -> Guest:
        """
        Store a registration without any uniqueness check.

        Args:
            registration: Validated registration

        Returns:
            Stored Guest with a fresh UUID4 id and UTC creation time
        """
        with self._lock:
            return self._insert(registration)

    def add_if_email_absent(self, registration: GuestRegistration) -> Guest | None:
        """
        Atomically store a registration unless its email is taken.

        Returns:
            Stored Guest, or None if the email is already registered
        """
        with self._lock:
            if self._find_by_email(registration.email) is not None:
                return None
            return self._insert(registration)

    def find_by_email(self, email: str) -> Guest | None:
        """Linear scan, comparing normalized addresses."""
        with self._lock:
            return self._find_by_email(email)

    def find_by_id(self, guest_id: str) -> Guest | None:
        with self._lock:
            return self._guests.get(guest_id)

    def count(self) -> int:
        with self._lock:
            return len(self._guests)

    def _find_by_email(self, email: str) -> Guest | None:
        wanted = normalize_email(email)
        for guest in self._guests.values():
            if normalize_email(guest.email) == wanted:
                return guest
        return None

    def _insert(self, registration: GuestRegistration) -> Guest:
        guest_id = str(uuid.uuid4())
        while guest_id in self._guests:
            guest_id = str(uuid.uuid4())
        guest = Guest(
            id=guest_id,
            created_at=datetime.now(timezone.utc),
            **asdict(registration),
        )
        self._guests[guest_id] = guest
        return guest
