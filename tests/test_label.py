import dataclasses

import pytest

from metricsfacade.label import Label, into_labels


def test_slice_labels():
    labels = [("x", "a"), ("y", "b")]
    assert into_labels(labels) == [Label("x", "a"), Label("y", "b")]


def test_labels_pass_through():
    labels = [Label("system", "http"), Label("user", "joe")]
    assert into_labels(labels) == labels
    assert into_labels(iter(labels)) == labels


def test_mapping_labels_keep_order():
    assert into_labels({"listener": "frontend", "server": "web03"}) == [
        Label("listener", "frontend"),
        Label("server", "web03"),
    ]


def test_none_and_empty():
    assert into_labels(None) == []
    assert into_labels([]) == []


def test_into_parts():
    assert Label("key", "value").into_parts() == ("key", "value")


def test_equality_hash_and_order():
    assert Label("a", "b") == Label("a", "b")
    assert hash(Label("a", "b")) == hash(Label("a", "b"))
    assert sorted([Label("b", "a"), Label("a", "z")]) == [Label("a", "z"), Label("b", "a")]


def test_label_is_frozen():
    label = Label("a", "b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        label.key = "c"
    assert label.into_parts() == ("a", "b")


@pytest.mark.parametrize("bad", [[("x",)], [("x", "a", "b")], [42], "xy"])
def test_into_labels_rejects(bad):
    with pytest.raises(TypeError):
        into_labels(bad)


def test_label_requires_strings():
    with pytest.raises(TypeError):
        Label("x", 1)