"""Core functionalities: the identity token and its operations.

Architecture Note:
    core/ holds the token type, which carries no mutable state.
    The counter that feeds it lives in allocation/.
"""

from unique_token.core.identity import Unique, duplicate, equals, new

__all__ = [
    # Identity
    "Unique",
    "new",
    "duplicate",
    "equals",
]
