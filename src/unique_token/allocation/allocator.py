"""Identity allocation service.

IdentityAllocator is the single piece of mutable state behind token minting:
a counter that only ever moves forward.
"""

from __future__ import annotations

import logging
import threading

from unique_token.config import AllocatorSettings

logger = logging.getLogger(__name__)


class IdentityExhaustedError(RuntimeError):
    """Raised when every value of the counter's width has been handed out."""


class IdentityAllocator:
    """Hands out distinct integers from a fixed-width, never-wrapping counter.

    Each call to allocate() returns the current value and advances the
    counter by one under a lock, so concurrent callers never receive the
    same value. The counter is never reset or decremented.

    The process-wide allocator behind Unique.new() always starts at 0.
    A non-zero start is only for standalone allocators.

    Args:
        settings: Counter width (default 64 bits).
        start: First value handed out (default 0).
    """

    def __init__(self, settings: AllocatorSettings | None = None, *, start: int = 0):
        """Initialize allocator.

        Args:
            settings: Counter width (default 64 bits).
            start: First value handed out (default 0).

        Raises:
            ValueError: If start does not fit in the counter's width.
        """
        self._settings = settings or AllocatorSettings()
        self._max = self._settings.max_value
        if not 0 <= start <= self._max:
            raise ValueError(
                f"start {start} does not fit in a {self._settings.counter_bits}-bit counter"
            )
        self._next = start
        self._lock = threading.Lock()

    @property
    def settings(self) -> AllocatorSettings:
        return self._settings

    def allocate(self) -> int:
        """Return a never-before-returned value and advance the counter.

        Returns:
            The pre-increment counter value.

        Raises:
            IdentityExhaustedError: If the counter's width is used up.
        """
        with self._lock:
            value = self._next
            if value > self._max:
                raise IdentityExhaustedError(
                    f"All {self._settings.counter_bits}-bit identities have been allocated"
                )
            self._next = value + 1
        return value

    def peek(self) -> int:
        """Value the next allocate() call would return (no side effects)."""
        with self._lock:
            return self._next


_allocator: IdentityAllocator | None = None
_settings: AllocatorSettings | None = None
_lock = threading.Lock()


def configure(settings: AllocatorSettings) -> None:
    """Set the process-wide allocator's settings before first use.

    Args:
        settings: Settings to use when the allocator is created.

    Raises:
        RuntimeError: If the process-wide allocator already exists.
    """
    global _settings
    with _lock:
        if _allocator is not None:
            raise RuntimeError("Process-wide allocator is already initialized")
        _settings = settings


def get_allocator() -> IdentityAllocator:
    """Access the process-wide allocator, creating it on first use.

    Returns:
        The process-local IdentityAllocator instance.
    """
    global _allocator
    if _allocator is None:
        with _lock:
            if _allocator is None:
                allocator = IdentityAllocator(_settings)
                logger.debug(
                    "Initialized identity allocator (counter_bits=%d)",
                    allocator.settings.counter_bits,
                )
                _allocator = allocator
    return _allocator
