"""Metric keys: a name plus an ordered list of labels."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import Union

from .label import Label, LabelLike, into_labels

__all__ = ["KeyName", "Key", "key_hash"]


@dataclass(frozen=True, order=True)
class KeyName:
    """Name component of a key."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError("key name must be a string")

    def as_str(self) -> str:
        """Return the name as a string."""
        return self.name

    def __str__(self) -> str:
        return self.name


NameLike = Union[str, KeyName]
LabelsLike = Union[Iterable[LabelLike], Mapping[str, str], None]


def _name_str(name: NameLike) -> str:
    if isinstance(name, KeyName):
        return name.name
    if isinstance(name, str):
        return name
    raise TypeError(f"cannot use {type(name).__name__} as a key name")


def key_hash(name: NameLike, labels: Iterable[Label] = ()) -> int:
    """Return a stable unsigned 64-bit hash of a name and its labels."""
    hasher = hashlib.blake2b(digest_size=8)

    def feed(text: str) -> None:
        data = text.encode("utf-8")
        hasher.update(len(data).to_bytes(8, "little"))
        hasher.update(data)

    feed(_name_str(name))
    labels = tuple(labels)
    hasher.update(len(labels).to_bytes(8, "little"))
    for label in labels:
        feed(label.key)
        feed(label.value)
    return int.from_bytes(hasher.digest(), "little")


@dataclass(frozen=True, order=True, eq=True)
class Key:
    """A metric identifier: a name and labels, compared in label insertion order."""

    name: str
    labels: tuple[Label, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _name_str(self.name))
        object.__setattr__(self, "labels", tuple(into_labels(self.labels)))

    @classmethod
    def from_name(cls, name: NameLike) -> Key:
        """Create a key with no labels."""
        return cls(_name_str(name))

    @classmethod
    def from_parts(cls, name: NameLike, labels: LabelsLike) -> Key:
        """Create a key from a name and labels, pairs or a mapping."""
        return cls(_name_str(name), tuple(into_labels(labels)))

    @property
    def key_name(self) -> KeyName:
        """The name of this key as a :class:`KeyName`."""
        return KeyName(self.name)

    def into_parts(self) -> tuple[KeyName, list[Label]]:
        """Return the name and a list of the labels."""
        return KeyName(self.name), list(self.labels)

    def with_extra_labels(self, extra_labels: LabelsLike) -> Key:
        """Return a copy of this key with ``extra_labels`` appended."""
        extra = into_labels(extra_labels)
        if not extra:
            return self
        return Key(self.name, self.labels + tuple(extra))

    @cached_property
    def _hash_value(self) -> int:
        return key_hash(self.name, self.labels)

    def get_hash(self) -> int:
        """Return the stable 64-bit hash of this key."""
        return self._hash_value

    def __hash__(self) -> int:
        return self._hash_value

    def __str__(self) -> str:
        if not self.labels:
            return f"Key({self.name})"
        rendered = ", ".join(f"{label.key} = {label.value}" for label in self.labels)
        return f"Key({self.name}, [{rendered}])"