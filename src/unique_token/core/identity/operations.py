"""Functional interface over Unique tokens.

Usage:
    x = new()
    x2 = duplicate(x)
    assert equals(x, x2)
"""

from __future__ import annotations

from unique_token.core.identity.models import Unique


def _require_token(value: object, name: str) -> Unique:
    if not isinstance(value, Unique):
        raise TypeError(f"{name} must be a Unique token, got {type(value).__name__}")
    return value


def new() -> Unique:
    """Mint a fresh token.

    Returns:
        Token unequal to every token minted before or after it.

    Raises:
        IdentityExhaustedError: If the process-wide counter is used up.
    """
    return Unique.new()


def duplicate(token: Unique) -> Unique:
    """Return a new token equal to ``token`` without allocating an identity.

    Args:
        token: Token to duplicate.

    Returns:
        Token that compares equal to ``token`` and to all its duplicates.

    Raises:
        TypeError: If ``token`` is not a Unique.
    """
    return _require_token(token, "token").duplicate()


def equals(a: Unique, b: Unique) -> bool:
    """Check whether two tokens trace back to the same new() call.

    Args:
        a: First token.
        b: Second token.

    Returns:
        True if both carry the same identity, False otherwise.

    Raises:
        TypeError: If either argument is not a Unique.
    """
    return _require_token(a, "a") == _require_token(b, "b")
