import dataclasses

import pytest

from metricsfacade.metadata import Level, Metadata


@pytest.mark.parametrize(
    "level, expected",
    [
        (Level.TRACE, 0),
        (Level.DEBUG, 1),
        (Level.INFO, 2),
        (Level.WARN, 3),
        (Level.ERROR, 4),
    ],
)
def test_level_values_follow_source_order(level, expected):
    assert Metadata("t", level).level.value == expected


def test_metadata_fields_round_trip():
    meta = Metadata("frontend", Level.WARN, "app.server")
    assert meta.target == "frontend"
    assert meta.level is Level.WARN
    assert meta.module_path == "app.server"


def test_metadata_defaults():
    meta = Metadata("frontend")
    assert meta.level is Level.INFO
    assert meta.module_path is None


def test_metadata_equality():
    assert Metadata("t", Level.DEBUG, "m") == Metadata("t", Level.DEBUG, "m")
    assert Metadata("t", Level.DEBUG) != Metadata("t", Level.ERROR)


def test_metadata_is_frozen():
    meta = Metadata("t")
    with pytest.raises(dataclasses.FrozenInstanceError):
        meta.target = "other"
    assert meta.target == "t"


def test_metadata_rejects_bad_level():
    with pytest.raises(TypeError):
        Metadata("t", 2)