"""Shared value types: units of measure, gauge operations and float coercion."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta
from numbers import Real

__all__ = ["Unit", "GaugeValueKind", "GaugeValue", "into_f64"]


_CANONICAL_LABELS = {
    "count": "",
    "percent": "%",
    "seconds": "s",
    "milliseconds": "ms",
    "microseconds": "μs",
    "nanoseconds": "ns",
    "tebibytes": "TiB",
    "gigibytes": "GiB",
    "mebibytes": "MiB",
    "kibibytes": "KiB",
    "bytes": "B",
    "terabits_per_second": "Tbps",
    "gigabits_per_second": "Gbps",
    "megabits_per_second": "Mbps",
    "kilobits_per_second": "kbps",
    "bits_per_second": "bps",
    "count_per_second": "/s",
}


class Unit(enum.Enum):
    """Unit of measure attached to a metric description."""

    COUNT = "count"
    PERCENT = "percent"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"
    TEBIBYTES = "tebibytes"
    GIGIBYTES = "gigibytes"
    MEBIBYTES = "mebibytes"
    KIBIBYTES = "kibibytes"
    BYTES = "bytes"
    TERABITS_PER_SECOND = "terabits_per_second"
    GIGABITS_PER_SECOND = "gigabits_per_second"
    MEGABITS_PER_SECOND = "megabits_per_second"
    KILOBITS_PER_SECOND = "kilobits_per_second"
    BITS_PER_SECOND = "bits_per_second"
    COUNT_PER_SECOND = "count_per_second"

    def as_str(self) -> str:
        """Return the string form of this unit."""
        return self.value

    def as_canonical_label(self) -> str:
        """Return the short display label (``s``, ``ns``, ``MiB``...); may be empty."""
        return _CANONICAL_LABELS[self.value]

    @classmethod
    def from_string(cls, s: str) -> Unit | None:
        """Parse the output of :meth:`as_str` back into a unit, or ``None``."""
        try:
            return cls(s)
        except ValueError:
            return None

    def is_time_based(self) -> bool:
        """Whether this unit measures time."""
        return self in _TIME_UNITS

    def is_data_based(self) -> bool:
        """Whether this unit measures data."""
        return self in _DATA_UNITS

    def is_data_rate_based(self) -> bool:
        """Whether this unit measures a data rate."""
        return self in _DATA_RATE_UNITS


_TIME_UNITS = frozenset(
    {Unit.SECONDS, Unit.MILLISECONDS, Unit.MICROSECONDS, Unit.NANOSECONDS}
)
_DATA_RATE_UNITS = frozenset(
    {
        Unit.TERABITS_PER_SECOND,
        Unit.GIGABITS_PER_SECOND,
        Unit.MEGABITS_PER_SECOND,
        Unit.KILOBITS_PER_SECOND,
        Unit.BITS_PER_SECOND,
    }
)
_DATA_UNITS = _DATA_RATE_UNITS | {
    Unit.TEBIBYTES,
    Unit.GIGIBYTES,
    Unit.MEBIBYTES,
    Unit.KIBIBYTES,
    Unit.BYTES,
}


class GaugeValueKind(enum.Enum):
    """The kind of operation a :class:`GaugeValue` performs."""

    ABSOLUTE = "absolute"
    INCREMENT = "increment"
    DECREMENT = "decrement"


@dataclass(frozen=True)
class GaugeValue:
    """A gauge operation: set, increment or decrement by ``value``."""

    kind: GaugeValueKind
    value: float

    @classmethod
    def absolute(cls, value: float) -> GaugeValue:
        """Operation that sets the gauge to ``value``."""
        return cls(GaugeValueKind.ABSOLUTE, float(value))

    @classmethod
    def increment(cls, value: float) -> GaugeValue:
        """Operation that raises the gauge by ``value``."""
        return cls(GaugeValueKind.INCREMENT, float(value))

    @classmethod
    def decrement(cls, value: float) -> GaugeValue:
        """Operation that lowers the gauge by ``value``."""
        return cls(GaugeValueKind.DECREMENT, float(value))

    def update_value(self, input_value: float) -> float:
        """Apply this operation to ``input_value`` and return the result."""
        if self.kind is GaugeValueKind.ABSOLUTE:
            return self.value
        if self.kind is GaugeValueKind.INCREMENT:
            return input_value + self.value
        return input_value - self.value


def into_f64(value: float | int | timedelta) -> float:
    """Coerce a number or a duration (as seconds) into a float."""
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"cannot convert {type(value).__name__} to a float")
    return float(value)