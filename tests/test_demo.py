import io

import pytest

from metricsfacade.common import Unit
from metricsfacade.demo import (
    PrintCounter,
    PrintGauge,
    PrintHistogram,
    PrintRecorder,
    main,
    run_demo,
)
from metricsfacade.handles import Counter, Gauge, Histogram
from metricsfacade.key import Key, KeyName
from metricsfacade.metadata import Metadata
from metricsfacade.recorder import local_recorder


def lines_of(stream):
    return stream.getvalue().splitlines()


def test_print_counter_lines():
    out = io.StringIO()
    handler = PrintCounter(Key.from_name("test_counter"), out)
    handler.increment(1)
    handler.absolute(42)
    assert lines_of(out) == [
        "counter increment for 'Key(test_counter)': 1",
        "counter absolute for 'Key(test_counter)': 42",
    ]


def test_print_gauge_formats_values():
    out = io.StringIO()
    key = Key.from_parts("test_gauge", [("type", "set")])
    handler = PrintGauge(key, out)
    handler.set(3.1459)
    handler.increment(1.0)
    handler.decrement(0.5)
    assert lines_of(out) == [
        "gauge set for 'Key(test_gauge, [type = set])': 3.1459",
        "gauge increment for 'Key(test_gauge, [type = set])': 1",
        "gauge decrement for 'Key(test_gauge, [type = set])': 0.5",
    ]


def test_print_histogram_line():
    out = io.StringIO()
    PrintHistogram(Key.from_name("test_histogram"), out).record(0.57721)
    assert lines_of(out) == ["histogram record for 'Key(test_histogram)': 0.57721"]


def test_describe_with_and_without_unit():
    out = io.StringIO()
    recorder = PrintRecorder(out)
    recorder.describe_counter(KeyName("bytes_sent"), Unit.BYTES, "total number of bytes sent")
    recorder.describe_gauge(KeyName("connection_count"), None, "current number of client connections")
    recorder.describe_histogram(KeyName("svc.execution_time"), Unit.MILLISECONDS, "x")
    assert lines_of(out) == [
        '(counter) registered key bytes_sent with unit Some(Bytes) and description "total number of bytes sent"',
        '(gauge) registered key connection_count with unit None and description "current number of client connections"',
        '(histogram) registered key svc.execution_time with unit Some(Milliseconds) and description "x"',
    ]


def test_registered_handles_print_through_recorder():
    out = io.StringIO()
    recorder = PrintRecorder(out)
    meta = Metadata("tests")
    key = Key.from_name("m")
    c = recorder.register_counter(key, meta)
    g = recorder.register_gauge(key, meta)
    h = recorder.register_histogram(key, meta)
    assert isinstance(c, Counter) and isinstance(g, Gauge) and isinstance(h, Histogram)
    c.increment(5)
    g.set(2.0)
    h.record(70.0)
    assert lines_of(out) == [
        "counter increment for 'Key(m)': 5",
        "gauge set for 'Key(m)': 2",
        "histogram record for 'Key(m)': 70",
    ]


def test_run_demo_through_local_recorder():
    out = io.StringIO()
    with local_recorder(PrintRecorder(out)):
        run_demo("web03")
    output = lines_of(out)
    assert output[0] == (
        '(counter) registered key requests_processed with unit None and '
        'description "number of requests processed"'
    )
    assert "counter absolute for 'Key(test_counter, [type = absolute])': 42" in output
    assert (
        "counter increment for 'Key(bytes_sent, [listener = frontend, server = web03])': 64"
        in output
    )
    assert "histogram record for 'Key(svc.execution_time, [type = users])': 70" in output
    assert sum(line.startswith("(") for line in output) == 6


def test_run_demo_without_recorder_prints_nothing(capsys):
    run_demo("web03")
    assert capsys.readouterr().out == ""


def test_main_uses_server_name(capsys):
    assert main(["--server", "web07"]) == 0
    out = capsys.readouterr().out
    assert "server = web07" in out
    assert "server = web03" not in out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])