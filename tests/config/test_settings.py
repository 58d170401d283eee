"""Tests for allocator settings."""

import pytest
from pydantic import ValidationError

from unique_token import AllocatorSettings


def test_defaults():
    settings = AllocatorSettings()

    assert settings.counter_bits == 64
    assert settings.max_value == 2**64 - 1


def test_explicit_width():
    settings = AllocatorSettings(counter_bits=96)

    assert settings.max_value == 2**96 - 1


def test_environment_is_ignored(monkeypatch):
    """Settings come only from explicit arguments."""
    monkeypatch.setenv("COUNTER_BITS", "128")

    assert AllocatorSettings().counter_bits == 64


def test_narrow_counter_rejected():
    """CRITICAL: Widths below 64 bits are refused.

    Why: A 32-bit identity space can be exhausted by a long-running process.
    """
    with pytest.raises(ValidationError):
        AllocatorSettings(counter_bits=32)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"counter_bits": 48},
        {"counter_bits": 63},
        {"counter_bits": 256},
        {"start": 100},
        {"unknown": 1},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValidationError):
        AllocatorSettings(**kwargs)


def test_settings_are_frozen():
    settings = AllocatorSettings()

    with pytest.raises(ValidationError):
        settings.counter_bits = 128
