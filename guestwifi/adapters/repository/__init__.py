"""Repository adapters - Guest store implementations."""

from .memory import InMemoryGuestRepository

__all__ = ["InMemoryGuestRepository"]
