"""A recorder that prints every metric event, and a walk through the emission API."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from decimal import Decimal
from typing import TextIO

from .common import Unit
from .emit import (
    counter,
    describe_counter,
    describe_gauge,
    describe_histogram,
    gauge,
    histogram,
)
from .handles import Counter, CounterFn, Gauge, GaugeFn, Histogram, HistogramFn
from .key import Key, KeyName
from .metadata import Metadata
from .recorder import Recorder, local_recorder

__all__ = [
    "PrintCounter",
    "PrintGauge",
    "PrintHistogram",
    "PrintRecorder",
    "run_demo",
    "main",
]


def _format_float(value: float) -> str:
    """Render a float the way a plain decimal display would, without exponents."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _debug_str(text: str) -> str:
    """Quote a string with escapes for quotes, backslashes and control characters."""
    escapes = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
    parts = []
    for ch in text:
        if ch in escapes:
            parts.append(escapes[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _debug_unit(unit: Unit | None) -> str:
    if unit is None:
        return "None"
    variant = "".join(word.capitalize() for word in unit.name.split("_"))
    return f"Some({variant})"


class _Printer:
    """Writes lines to a stream, or to the current standard output."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _emit(self, line: str) -> None:
        print(line, file=self._stream if self._stream is not None else sys.stdout)


class PrintCounter(_Printer, CounterFn):
    """Counter handler that prints each update."""

    def __init__(self, key: Key, stream: TextIO | None = None) -> None:
        super().__init__(stream)
        self.key = key

    def increment(self, value: int) -> None:
        self._emit(f"counter increment for '{self.key}': {value}")

    def absolute(self, value: int) -> None:
        self._emit(f"counter absolute for '{self.key}': {value}")


class PrintGauge(_Printer, GaugeFn):
    """Gauge handler that prints each update."""

    def __init__(self, key: Key, stream: TextIO | None = None) -> None:
        super().__init__(stream)
        self.key = key

    def increment(self, value: float) -> None:
        self._emit(f"gauge increment for '{self.key}': {_format_float(value)}")

    def decrement(self, value: float) -> None:
        self._emit(f"gauge decrement for '{self.key}': {_format_float(value)}")

    def set(self, value: float) -> None:
        self._emit(f"gauge set for '{self.key}': {_format_float(value)}")


class PrintHistogram(_Printer, HistogramFn):
    """Histogram handler that prints each recorded value."""

    def __init__(self, key: Key, stream: TextIO | None = None) -> None:
        super().__init__(stream)
        self.key = key

    def record(self, value: float) -> None:
        self._emit(f"histogram record for '{self.key}': {_format_float(value)}")


class PrintRecorder(_Printer, Recorder):
    """Recorder that prints descriptions and hands out printing handles."""

    def _describe(
        self, kind: str, key: KeyName, unit: Unit | None, description: str
    ) -> None:
        self._emit(
            f"({kind}) registered key {key.as_str()} with unit {_debug_unit(unit)}"
            f" and description {_debug_str(description)}"
        )

    def describe_counter(
        self, key: KeyName, unit: Unit | None, description: str
    ) -> None:
        self._describe("counter", key, unit, description)

    def describe_gauge(self, key: KeyName, unit: Unit | None, description: str) -> None:
        self._describe("gauge", key, unit, description)

    def describe_histogram(
        self, key: KeyName, unit: Unit | None, description: str
    ) -> None:
        self._describe("histogram", key, unit, description)

    def register_counter(self, key: Key, metadata: Metadata) -> Counter:
        return Counter(PrintCounter(key, self._stream))

    def register_gauge(self, key: Key, metadata: Metadata) -> Gauge:
        return Gauge(PrintGauge(key, self._stream))

    def register_histogram(self, key: Key, metadata: Metadata) -> Histogram:
        return Histogram(PrintHistogram(key, self._stream))


def run_demo(server_name: str = "web03") -> None:
    """Describe and emit a set of metrics through the current recorder."""
    common_labels = [("listener", "frontend")]

    describe_counter("requests_processed", "number of requests processed")
    describe_counter("bytes_sent", "total number of bytes sent", Unit.BYTES)
    describe_gauge("connection_count", "current number of client connections")
    describe_histogram(
        "svc.execution_time", "execution time of request handler", Unit.MILLISECONDS
    )
    describe_gauge("unused_gauge", "some gauge we'll never use in this program")
    describe_histogram(
        "unused_histogram",
        "some histogram we'll also never use in this program",
        Unit.SECONDS,
    )

    counter("test_counter").increment(1)
    counter("test_counter", [("type", "absolute")]).absolute(42)

    gauge("test_gauge").increment(1.0)
    gauge("test_gauge", [("type", "decrement")]).decrement(1.0)
    gauge("test_gauge", [("type", "set")]).set(3.1459)

    histogram("test_histogram").record(0.57721)

    def label_sets(first: tuple[str, str]) -> list[list[tuple[str, str]] | None]:
        return [None, [first], [first, ("server", server_name)], common_labels]

    for name, first in (
        ("bytes_sent", ("listener", "frontend")),
        ("requests_processed", ("request_type", "admin")),
    ):
        amount = 64 if name == "bytes_sent" else 1
        for labels in label_sets(first):
            counter(name, labels).increment(amount)

    for labels in label_sets(("listener", "frontend")):
        counter("bytes_sent", labels).absolute(64)

    for operation in ("set", "increment", "decrement"):
        for labels in label_sets(("listener", "frontend")):
            getattr(gauge("connection_count", labels), operation)(300.0)

    for labels in label_sets(("type", "users")):
        histogram("svc.execution_time", labels).record(70.0)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration with a printing recorder on standard output."""
    parser = argparse.ArgumentParser(
        description="Print every metric event emitted by a sample workload."
    )
    parser.add_argument("--server", default="web03", help="server label value")
    args = parser.parse_args(argv)
    with local_recorder(PrintRecorder()):
        run_demo(args.server)
    return 0


if __name__ == "__main__":
    sys.exit(main())