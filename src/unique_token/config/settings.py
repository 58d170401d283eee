"""Configuration settings using Pydantic Settings.

Provides typed configuration for the process-wide identity allocator.

Usage:
    from unique_token.config import AllocatorSettings

    settings = AllocatorSettings(counter_bits=128)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class AllocatorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the identity allocator.

    Attributes:
        counter_bits: Width of the unsigned counter (64..128). Allocation past
            2**counter_bits - 1 raises IdentityExhaustedError.

    There is no start setting: the process-wide counter always begins at 0,
    so no caller can choose the identity of a minted token.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra="forbid",
    )

    counter_bits: int = Field(default=64, ge=64, le=128)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read explicit keyword arguments only; identities ignore the environment."""
        return (init_settings,)

    @property
    def max_value(self) -> int:
        """Largest identity value the counter may hand out."""
        return (1 << self.counter_bits) - 1
