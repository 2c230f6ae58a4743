# metricsfacade

A lightweight metrics facade. Libraries emit metrics through one small API;
the application decides where they go by installing a *recorder*.

Three kinds of metric are supported:

- **counters** – unsigned 64-bit integers (`Counter.increment`, `Counter.absolute`)
- **gauges** – floating-point values that go up and down (`Gauge.increment`, `Gauge.decrement`, `Gauge.set`)
- **histograms** – observations of a measurement (`Histogram.record`)

When no recorder is installed, a `NoopRecorder` takes its place and hands out
handles that ignore every update, so instrumented code runs even when nobody
collects the metrics.

## Installation

```
pip install metricsfacade
```

The package has no runtime dependencies.

## Emitting metrics

```python
from metricsfacade.emit import counter, gauge, histogram, describe_counter
from metricsfacade.common import Unit

describe_counter("bytes_sent", "total number of bytes sent", Unit.BYTES)

counter("requests_processed").increment(1)
counter("bytes_sent", [("listener", "frontend")]).increment(64)
gauge("connection_count", {"listener": "frontend"}).set(300.0)
histogram("svc.execution_time").record(70.0)
```

- `counter`, `gauge` and `histogram` take a name, optional labels, and the
  keyword-only `target` and `level` (a `metricsfacade.metadata.Level`, default
  `Level.INFO`). They build a `Metadata` whose target defaults to the calling
  module's name and pass it to the recorder with the key.
- `describe_counter`, `describe_gauge` and `describe_histogram` take a name, a
  description and an optional `Unit`.
- Counter values must be integers in the unsigned 64-bit range; anything else
  raises `TypeError` or `ValueError`. Gauge and histogram values may be ints,
  floats or `datetime.timedelta` (taken as seconds), converted with
  `metricsfacade.common.into_f64`.

Labels may be given as a list of `Label` objects (`metricsfacade.label`), a
sequence of `(key, value)` pairs or a mapping. A metric's identity is a `Key`
(`metricsfacade.key`): its name plus its labels, compared in order. `str(key)`
renders as `Key(name, [k = v, ...])`, and `Key.get_hash()` gives a stable
unsigned 64-bit hash. `metricsfacade.emit.make_key` builds a key the same way
the emission functions do.

`Unit` converts to and from strings (`as_str`, `Unit.from_string`), gives a short
label (`as_canonical_label`, e.g. `ms`, `MiB`) and tells whether it is time, data
or data-rate based. `GaugeValue` describes a gauge operation and applies it to a
value with `update_value`.

## Writing a recorder

Subclass `Recorder` from `metricsfacade.recorder` and implement the `describe_*`
and `register_*` methods. Registration returns handles (`Counter`, `Gauge`,
`Histogram` from `metricsfacade.handles`) wrapping an object that implements
`CounterFn`, `GaugeFn` or `HistogramFn`, e.g. `Counter(my_handler)`.
`AtomicCounter` and `AtomicGauge` in `metricsfacade.atomics` are thread-safe
ready-made handlers; read them back with `load()`. `AtomicCounter.absolute`
never lowers the value.

### Installing it

Globally, once per process:

```python
from metricsfacade.recorder import set_global_recorder

set_global_recorder(MyRecorder())
```

A second call raises `SetRecorderError`; `into_inner()` hands back the recorder
that was refused. `RecorderCell` is the set-once holder behind this, usable on
its own.

Or temporarily, for the current thread only (handy in tests):

```python
from metricsfacade.recorder import local_recorder, with_local_recorder

with local_recorder(MyRecorder()):
    counter("jobs").increment(1)

result = with_local_recorder(MyRecorder(), lambda: do_work())
```

A local recorder takes priority over the global one; when the block ends, the
previous local recorder (if any) is restored.

## Demo

`metricsfacade.demo.PrintRecorder` prints every description and update.
Run a sample workload through it with:

```
metricsfacade-demo
metricsfacade-demo --server web07
```

`--server` sets the value of the `server` label (default `web03`).

## What it does not do

This package only carries metric events from the emitting code to a recorder.
It stores nothing beyond what a recorder keeps, ships no exporter to any
monitoring system, and does no histogram bucketing or quantile computation;
those belong in a recorder you write or install.

## Running the tests

```
pip install -e .[test]
pytest
```