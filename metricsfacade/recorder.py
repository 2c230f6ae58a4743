"""Recorders, the global recorder cell and per-thread local recorders."""

from __future__ import annotations

import abc
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from .common import Unit
from .handles import Counter, Gauge, Histogram
from .key import Key, KeyName
from .metadata import Metadata

__all__ = [
    "Recorder",
    "NoopRecorder",
    "SetRecorderError",
    "RecorderCell",
    "set_global_recorder",
    "local_recorder",
    "with_local_recorder",
    "with_recorder",
]

T = TypeVar("T")
R = TypeVar("R", bound="Recorder")

_SET_RECORDER_ERROR = (
    "attempted to set a recorder after the metrics system was already initialized"
)


class Recorder(abc.ABC):
    """Interface between the emission functions and a metrics exporter."""

    @abc.abstractmethod
    def describe_counter(
        self, key: KeyName, unit: Unit | None, description: str
    ) -> None:
        """Describe a counter with an optional unit and a description."""

    @abc.abstractmethod
    def describe_gauge(self, key: KeyName, unit: Unit | None, description: str) -> None:
        """Describe a gauge with an optional unit and a description."""

    @abc.abstractmethod
    def describe_histogram(
        self, key: KeyName, unit: Unit | None, description: str
    ) -> None:
        """Describe a histogram with an optional unit and a description."""

    @abc.abstractmethod
    def register_counter(self, key: Key, metadata: Metadata) -> Counter:
        """Register a counter and return its handle."""

    @abc.abstractmethod
    def register_gauge(self, key: Key, metadata: Metadata) -> Gauge:
        """Register a gauge and return its handle."""

    @abc.abstractmethod
    def register_histogram(self, key: Key, metadata: Metadata) -> Histogram:
        """Register a histogram and return its handle."""


class NoopRecorder(Recorder):
    """A recorder that ignores descriptions and hands out no-op handles."""

    def describe_counter(
        self, key: KeyName, unit: Unit | None, description: str
    ) -> None:
        pass

    def describe_gauge(self, key: KeyName, unit: Unit | None, description: str) -> None:
        pass

    def describe_histogram(
        self, key: KeyName, unit: Unit | None, description: str
    ) -> None:
        pass

    def register_counter(self, key: Key, metadata: Metadata) -> Counter:
        return Counter.noop()

    def register_gauge(self, key: Key, metadata: Metadata) -> Gauge:
        return Gauge.noop()

    def register_histogram(self, key: Key, metadata: Metadata) -> Histogram:
        return Histogram.noop()


class SetRecorderError(Exception, Generic[R]):
    """Raised when a recorder is installed after one was already installed."""

    def __init__(self, recorder: R) -> None:
        super().__init__(_SET_RECORDER_ERROR)
        self.recorder = recorder

    def into_inner(self) -> R:
        """Return the recorder that could not be installed."""
        return self.recorder


def _require_recorder(recorder: object) -> None:
    if not isinstance(recorder, Recorder):
        raise TypeError(f"{type(recorder).__name__} is not a Recorder")


class RecorderCell:
    """A cell that can hold a recorder, set at most once."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._recorder: Recorder | None = None

    def set(self, recorder: R) -> None:
        """Install ``recorder``; raise :class:`SetRecorderError` if already set."""
        _require_recorder(recorder)
        with self._lock:
            if self._recorder is not None:
                raise SetRecorderError(recorder)
            self._recorder = recorder

    def try_load(self) -> Recorder | None:
        """Return the installed recorder, or ``None`` if none is set."""
        return self._recorder


_NOOP_RECORDER = NoopRecorder()
_GLOBAL_RECORDER = RecorderCell()


class _LocalState(threading.local):
    recorder: Recorder | None = None


_LOCAL = _LocalState()


def set_global_recorder(recorder: R) -> None:
    """Install the process-wide recorder; this can be done only once."""
    _GLOBAL_RECORDER.set(recorder)


@contextmanager
def local_recorder(recorder: Recorder) -> Iterator[Recorder]:
    """Use ``recorder`` for the current thread while the block runs."""
    _require_recorder(recorder)
    previous = _LOCAL.recorder
    _LOCAL.recorder = recorder
    try:
        yield recorder
    finally:
        _LOCAL.recorder = previous


def with_local_recorder(recorder: Recorder, f: Callable[[], T]) -> T:
    """Call ``f`` with ``recorder`` acting as this thread's recorder."""
    with local_recorder(recorder):
        return f()


def with_recorder(f: Callable[[Recorder], T]) -> T:
    """Call ``f`` with the local, else global, else no-op recorder."""
    current = _LOCAL.recorder
    if current is not None:
        return f(current)
    installed = _GLOBAL_RECORDER.try_load()
    if installed is not None:
        return f(installed)
    return f(_NOOP_RECORDER)