"""Identity token model.

Usage:
    x = Unique.new()
    y = Unique.new()
    assert x != y
    assert x == x.duplicate()
"""

from __future__ import annotations

from typing import Any, NoReturn, Self, final

from unique_token.allocation import get_allocator


@final
class Unique:
    """Opaque token that compares equal only to duplicates of itself.

    Each call to Unique.new() takes a fresh value from the process-wide
    allocator. The only way to get a token equal to an existing one is to
    duplicate it (duplicate(), copy.copy or copy.deepcopy).

    Tokens cannot be built from a chosen identity, subclassed, mutated or
    pickled.
    """

    __slots__ = ("_identity",)

    _identity: int

    def __new__(cls, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError("Unique tokens are created with Unique.new() or duplicated from one")

    def __init_subclass__(cls, **kwargs: Any) -> NoReturn:
        raise TypeError("Unique cannot be subclassed")

    @classmethod
    def _wrap(cls, identity: int) -> Self:
        token = object.__new__(cls)
        object.__setattr__(token, "_identity", identity)
        return token

    @classmethod
    def new(cls) -> Self:
        """Mint a token unequal to every other minted token.

        Returns:
            Fresh token.

        Raises:
            IdentityExhaustedError: If the process-wide counter is used up.
        """
        return cls._wrap(get_allocator().allocate())

    def duplicate(self) -> Unique:
        """Return a separate token object equal to this one.

        Does not touch the allocator.
        """
        return Unique._wrap(self._identity)

    def __copy__(self) -> Unique:
        return self.duplicate()

    def __deepcopy__(self, memo: dict[int, Any]) -> Unique:
        return self.duplicate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unique):
            return NotImplemented
        return self._identity == other._identity

    def __hash__(self) -> int:
        return hash(self._identity)

    def __repr__(self) -> str:
        return f"Unique(0x{self._identity:016X})"

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"Unique is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Unique is immutable; cannot delete {name!r}")

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        # Identities are meaningless outside the process that minted them.
        raise TypeError("Unique tokens cannot be serialized")
