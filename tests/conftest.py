"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

import unique_token.allocation.allocator as allocator_module
from unique_token import IdentityAllocator


@pytest.fixture
def fresh_process(monkeypatch):
    """Process-wide allocator state as it is before the first token is minted."""
    monkeypatch.setattr(allocator_module, "_allocator", None)
    monkeypatch.setattr(allocator_module, "_settings", None)
    return allocator_module


@pytest.fixture
def allocator():
    """Standalone allocator with default settings."""
    return IdentityAllocator()


@pytest.fixture
def nearly_exhausted_allocator():
    """Default 64-bit allocator with exactly one identity left."""
    return IdentityAllocator(start=2**64 - 1)
