"""Configuration module using Pydantic Settings.

Usage:
    from unique_token.config import AllocatorSettings

    settings = AllocatorSettings(start=0, counter_bits=64)
"""

from unique_token.config.settings import AllocatorSettings

__all__ = [
    "AllocatorSettings",
]
