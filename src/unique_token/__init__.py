"""unique_token: process-unique identity tokens.

Usage:
    from unique_token import Unique

    x = Unique.new()
    y = Unique.new()

    # duplicates are equal
    assert x == x.duplicate()

    # tokens from different calls are unequal
    assert x != y
"""

__version__ = "0.1.0"

# Allocation
from unique_token.allocation import (
    IdentityAllocator,
    IdentityExhaustedError,
    configure,
    get_allocator,
)

# Config
from unique_token.config import AllocatorSettings

# Core primitives
from unique_token.core import (
    Unique,
    duplicate,
    equals,
    new,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Unique",
    "new",
    "duplicate",
    "equals",
    # Allocation
    "IdentityAllocator",
    "IdentityExhaustedError",
    "configure",
    "get_allocator",
    # Config
    "AllocatorSettings",
]
