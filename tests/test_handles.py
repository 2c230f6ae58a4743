from datetime import timedelta

import pytest

from metricsfacade.handles import (
    Counter,
    CounterFn,
    Gauge,
    GaugeFn,
    Histogram,
    HistogramFn,
)


class Recording(CounterFn, GaugeFn, HistogramFn):
    def __init__(self):
        self.calls = []

    def increment(self, value):
        self.calls.append(("increment", value))

    def absolute(self, value):
        self.calls.append(("absolute", value))

    def decrement(self, value):
        self.calls.append(("decrement", value))

    def set(self, value):
        self.calls.append(("set", value))

    def record(self, value):
        self.calls.append(("record", value))


def test_counter_forwards_calls():
    handler = Recording()
    counter = Counter(handler)
    counter.increment(3)
    counter.absolute(42)
    assert handler.calls == [("increment", 3), ("absolute", 42)]
    assert counter.is_noop is False


def test_gauge_forwards_floats():
    handler = Recording()
    gauge = Gauge(handler)
    gauge.increment(1)
    gauge.decrement(2.5)
    gauge.set(3.1459)
    assert handler.calls == [("increment", 1.0), ("decrement", 2.5), ("set", 3.1459)]
    assert isinstance(handler.calls[0][1], float) and handler.calls[0][1] == 1.0


def test_histogram_accepts_duration():
    handler = Recording()
    histogram = Histogram(handler)
    histogram.record(0.57721)
    histogram.record(timedelta(milliseconds=1500))
    assert handler.calls == [("record", 0.57721), ("record", 1.5)]


def test_noop_handles_do_nothing():
    assert Counter.noop().is_noop
    assert Gauge.noop().is_noop
    assert Histogram.noop().is_noop
    Counter.noop().increment(1)
    Gauge.noop().set(1.0)
    Histogram.noop().record(1.0)
    assert Counter().is_noop


def test_shared_handler_between_handles():
    handler = Recording()
    a, b = Counter(handler), Counter(handler)
    a.increment(1)
    b.increment(2)
    assert handler.calls == [("increment", 1), ("increment", 2)]


@pytest.mark.parametrize("bad", [-1, 2**64])
def test_counter_rejects_out_of_range(bad):
    handler = Recording()
    with pytest.raises(ValueError):
        Counter(handler).increment(bad)
    assert handler.calls == []


@pytest.mark.parametrize("bad", [1.5, "1", True])
def test_counter_rejects_non_integers(bad):
    with pytest.raises(TypeError):
        Counter.noop().absolute(bad)


def test_gauge_rejects_strings():
    with pytest.raises(TypeError):
        Gauge.noop().set("3")
    with pytest.raises(TypeError):
        Histogram.noop().record(None)


def test_handler_interfaces_are_abstract():
    with pytest.raises(TypeError):
        CounterFn()
    with pytest.raises(TypeError):
        GaugeFn()
    with pytest.raises(TypeError):
        HistogramFn()