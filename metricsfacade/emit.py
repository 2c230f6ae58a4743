"""Functions that register, emit and describe metrics through the current recorder."""

from __future__ import annotations

import inspect

from .common import Unit
from .handles import Counter, Gauge, Histogram
from .key import Key, KeyName, LabelsLike, NameLike
from .metadata import Level, Metadata
from .recorder import with_recorder

__all__ = [
    "make_key",
    "counter",
    "gauge",
    "histogram",
    "describe_counter",
    "describe_gauge",
    "describe_histogram",
]


def _caller_module(depth: int) -> str:
    """Return the module name of the frame ``depth`` levels above the caller."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        module = inspect.getmodule(frame) if frame is not None else None
        return module.__name__ if module is not None else "__main__"
    finally:
        del frame


def make_key(name: NameLike, labels: LabelsLike = None) -> Key:
    """Build a key from a name and optional labels, pairs or a mapping."""
    if labels is None:
        return Key.from_name(name)
    return Key.from_parts(name, labels)


def _metadata(target: str | None, level: Level, caller: str) -> Metadata:
    return Metadata(target if target is not None else caller, level, caller)


def counter(
    name: NameLike,
    labels: LabelsLike = None,
    *,
    target: str | None = None,
    level: Level = Level.INFO,
) -> Counter:
    """Register a counter with the current recorder and return its handle."""
    key = make_key(name, labels)
    metadata = _metadata(target, level, _caller_module(1))
    return with_recorder(lambda recorder: recorder.register_counter(key, metadata))


def gauge(
    name: NameLike,
    labels: LabelsLike = None,
    *,
    target: str | None = None,
    level: Level = Level.INFO,
) -> Gauge:
    """Register a gauge with the current recorder and return its handle."""
    key = make_key(name, labels)
    metadata = _metadata(target, level, _caller_module(1))
    return with_recorder(lambda recorder: recorder.register_gauge(key, metadata))


def histogram(
    name: NameLike,
    labels: LabelsLike = None,
    *,
    target: str | None = None,
    level: Level = Level.INFO,
) -> Histogram:
    """Register a histogram with the current recorder and return its handle."""
    key = make_key(name, labels)
    metadata = _metadata(target, level, _caller_module(1))
    return with_recorder(lambda recorder: recorder.register_histogram(key, metadata))


def _describe_args(
    name: NameLike, description: str, unit: Unit | None
) -> tuple[KeyName, Unit | None, str]:
    key_name = name if isinstance(name, KeyName) else KeyName(name)
    if unit is not None and not isinstance(unit, Unit):
        raise TypeError(f"unit must be a Unit or None, not {type(unit).__name__}")
    if not isinstance(description, str):
        raise TypeError("description must be a string")
    return key_name, unit, description


def describe_counter(
    name: NameLike, description: str, unit: Unit | None = None
) -> None:
    """Describe a counter, optionally with a unit."""
    args = _describe_args(name, description, unit)
    with_recorder(lambda recorder: recorder.describe_counter(*args))


def describe_gauge(name: NameLike, description: str, unit: Unit | None = None) -> None:
    """Describe a gauge, optionally with a unit."""
    args = _describe_args(name, description, unit)
    with_recorder(lambda recorder: recorder.describe_gauge(*args))


def describe_histogram(
    name: NameLike, description: str, unit: Unit | None = None
) -> None:
    """Describe a histogram, optionally with a unit."""
    args = _describe_args(name, description, unit)
    with_recorder(lambda recorder: recorder.describe_histogram(*args))