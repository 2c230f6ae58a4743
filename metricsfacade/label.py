"""Labels: key/value metadata attached to a metric key."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Union

__all__ = ["Label", "into_labels"]


@dataclass(frozen=True, order=True)
class Label:
    """A key/value pair describing the context of a metric."""

    key: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not isinstance(self.value, str):
            raise TypeError("label key and value must be strings")

    def into_parts(self) -> tuple[str, str]:
        """Return the key and value as a tuple."""
        return self.key, self.value


LabelLike = Union[Label, "tuple[str, str]"]


def into_labels(
    labels: Iterable[LabelLike] | Mapping[str, str] | None,
) -> list[Label]:
    """Turn labels, key/value pairs or a mapping into a list of :class:`Label`."""
    if labels is None:
        return []
    if isinstance(labels, Mapping):
        return [Label(k, v) for k, v in labels.items()]
    if isinstance(labels, (str, bytes)):
        raise TypeError("labels must be an iterable of labels or pairs, not a string")
    result = []
    for item in labels:
        if isinstance(item, Label):
            result.append(item)
        elif isinstance(item, tuple) and len(item) == 2:
            result.append(Label(*item))
        else:
            raise TypeError(f"cannot convert {item!r} into a label")
    return result