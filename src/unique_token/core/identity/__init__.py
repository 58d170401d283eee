"""Identity tokens: minting, duplication and comparison."""

from unique_token.core.identity.models import Unique
from unique_token.core.identity.operations import duplicate, equals, new

__all__ = [
    "Unique",
    "new",
    "duplicate",
    "equals",
]
