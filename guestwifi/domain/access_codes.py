"""
Access code policies - Implements the AccessCodePolicy port.

Two interchangeable policies exist:
- FormatAccessCodePolicy: accepts any 6-9 digit code. Real network
  authorization is left to the router's RADIUS server.
- AllowListAccessCodePolicy: accepts only codes issued by reception.

The policy is chosen by configuration, see build_access_code_policy().
"""

from collections.abc import Iterable

from .validators import check_access_code


class FormatAccessCodePolicy:
    """Accepts codes that have the right shape."""

    def is_accepted(self, code: str) -> bool:
        return check_access_code(code).ok

    def known_codes(self) -> list[str] | None:
        return None


class AllowListAccessCodePolicy:
    """Accepts only codes from a fixed list."""

    def __init__(self, codes: Iterable[str]) -> None:
        self._codes = frozenset(code.strip() for code in codes if code.strip())

    def is_accepted(self, code: str) -> bool:
        return code in self._codes

    def known_codes(self) -> list[str] | None:
        return sorted(self._codes)


def build_access_code_policy(
    policy: str, codes: Iterable[str] = ()
) -> FormatAccessCodePolicy | AllowListAccessCodePolicy:
    """
    Create the configured access code policy.

    Args:
        policy: "format" or "allowlist"
        codes: Accepted codes, used only by the allowlist policy

    Raises:
        ValueError: If the policy name is unknown
    """
    if policy == "format":
        return FormatAccessCodePolicy()
    if policy == "allowlist":
        return AllowListAccessCodePolicy(codes)
    raise ValueError(f"Unknown access code policy: {policy}")
