"""Metric handles and the handler interfaces behind them."""

from __future__ import annotations

import abc
from datetime import timedelta

from .common import into_f64

__all__ = [
    "CounterFn",
    "GaugeFn",
    "HistogramFn",
    "Counter",
    "Gauge",
    "Histogram",
]

_U64_LIMIT = 2**64


def _check_u64(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"counter values must be integers, not {type(value).__name__}")
    if not 0 <= value < _U64_LIMIT:
        raise ValueError(f"counter value {value} is outside the unsigned 64-bit range")
    return value


class CounterFn(abc.ABC):
    """Handler behind a :class:`Counter`."""

    @abc.abstractmethod
    def increment(self, value: int) -> None:
        """Increment the counter by ``value``."""

    @abc.abstractmethod
    def absolute(self, value: int) -> None:
        """Raise the counter to at least ``value``; never lower it."""


class GaugeFn(abc.ABC):
    """Handler behind a :class:`Gauge`."""

    @abc.abstractmethod
    def increment(self, value: float) -> None:
        """Increment the gauge by ``value``."""

    @abc.abstractmethod
    def decrement(self, value: float) -> None:
        """Decrement the gauge by ``value``."""

    @abc.abstractmethod
    def set(self, value: float) -> None:
        """Set the gauge to ``value``."""


class HistogramFn(abc.ABC):
    """Handler behind a :class:`Histogram`."""

    @abc.abstractmethod
    def record(self, value: float) -> None:
        """Record ``value`` into the histogram."""


class Counter:
    """A counter handle; does nothing when it has no handler."""

    __slots__ = ("_inner",)

    def __init__(self, inner: CounterFn | None = None) -> None:
        self._inner = inner

    @classmethod
    def noop(cls) -> Counter:
        """Return a counter that ignores every update."""
        return cls(None)

    @property
    def is_noop(self) -> bool:
        """Whether this handle has no handler."""
        return self._inner is None

    def increment(self, value: int) -> None:
        """Increment the counter."""
        value = _check_u64(value)
        if self._inner is not None:
            self._inner.increment(value)

    def absolute(self, value: int) -> None:
        """Set the counter to at least ``value``."""
        value = _check_u64(value)
        if self._inner is not None:
            self._inner.absolute(value)


class Gauge:
    """A gauge handle; does nothing when it has no handler."""

    __slots__ = ("_inner",)

    def __init__(self, inner: GaugeFn | None = None) -> None:
        self._inner = inner

    @classmethod
    def noop(cls) -> Gauge:
        """Return a gauge that ignores every update."""
        return cls(None)

    @property
    def is_noop(self) -> bool:
        """Whether this handle has no handler."""
        return self._inner is None

    def increment(self, value: float | int | timedelta) -> None:
        """Increment the gauge."""
        converted = into_f64(value)
        if self._inner is not None:
            self._inner.increment(converted)

    def decrement(self, value: float | int | timedelta) -> None:
        """Decrement the gauge."""
        converted = into_f64(value)
        if self._inner is not None:
            self._inner.decrement(converted)

    def set(self, value: float | int | timedelta) -> None:
        """Set the gauge."""
        converted = into_f64(value)
        if self._inner is not None:
            self._inner.set(converted)


class Histogram:
    """A histogram handle; does nothing when it has no handler."""

    __slots__ = ("_inner",)

    def __init__(self, inner: HistogramFn | None = None) -> None:
        self._inner = inner

    @classmethod
    def noop(cls) -> Histogram:
        """Return a histogram that ignores every value."""
        return cls(None)

    @property
    def is_noop(self) -> bool:
        """Whether this handle has no handler."""
        return self._inner is None

    def record(self, value: float | int | timedelta) -> None:
        """Record a value in the histogram."""
        converted = into_f64(value)
        if self._inner is not None:
            self._inner.record(converted)