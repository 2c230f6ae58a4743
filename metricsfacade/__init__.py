"""A lightweight metrics facade: emit counters, gauges and histograms to a pluggable recorder."""

__version__ = "0.1.0"