"""Verification adapters - Email deliverability and name plausibility clients."""

from .openai_names import OpenAINameValidator
from .permissive import PermissiveEmailVerifier, PermissiveNameValidator
from .verimail import VerimailEmailVerifier

__all__ = [
    "OpenAINameValidator",
    "PermissiveEmailVerifier",
    "PermissiveNameValidator",
    "VerimailEmailVerifier",
]
