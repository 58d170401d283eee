"""Process-wide identity allocation."""

from unique_token.allocation.allocator import (
    IdentityAllocator,
    IdentityExhaustedError,
    configure,
    get_allocator,
)

__all__ = [
    "IdentityAllocator",
    "IdentityExhaustedError",
    "configure",
    "get_allocator",
]
