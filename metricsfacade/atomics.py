"""Thread-safe storage types implementing the counter and gauge handlers."""

from __future__ import annotations

import threading

from .handles import CounterFn, GaugeFn

__all__ = ["AtomicCounter", "AtomicGauge"]

_U64_MASK = 2**64 - 1


class AtomicCounter(CounterFn):
    """An unsigned 64-bit counter guarded by a lock; increments wrap around."""

    def __init__(self, value: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = value & _U64_MASK

    def increment(self, value: int) -> None:
        with self._lock:
            self._value = (self._value + value) & _U64_MASK

    def absolute(self, value: int) -> None:
        with self._lock:
            self._value = max(self._value, value & _U64_MASK)

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value


class AtomicGauge(GaugeFn):
    """A floating-point gauge guarded by a lock."""

    def __init__(self, value: float = 0.0) -> None:
        self._lock = threading.Lock()
        self._value = float(value)

    def increment(self, value: float) -> None:
        with self._lock:
            self._value += value

    def decrement(self, value: float) -> None:
        with self._lock:
            self._value -= value

    def set(self, value: float) -> None:
        with self._lock:
            self._value = float(value)

    def load(self) -> float:
        """Return the current value."""
        with self._lock:
            return self._value