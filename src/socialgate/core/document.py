"""Read-only view over a parsed JSON profile payload."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

Path = str | Sequence[str | int]


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return copy.copy(value)


def _split(path: Path) -> tuple[str | int, ...]:
    if isinstance(path, str):
        return tuple(part for part in path.split(".") if part)
    return tuple(path)


class ProfileDocument(Mapping[str, Any]):
    """Immutable JSON object with path lookups.

    Nested objects are exposed as read-only mappings and arrays as tuples.
    ``get`` accepts a dotted path (``"image.url"``) or a sequence of keys
    and list indices (``("emails", 0, "value")``).
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        if not isinstance(data, Mapping):
            raise TypeError(f"ProfileDocument needs a JSON object, got {type(data).__name__}")
        self._data = _freeze(data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ProfileDocument({dict(self._data)!r})"

    def get(self, path: Path, default: Any = None) -> Any:
        """Resolve ``path``; return ``default`` if any step is missing."""
        node: Any = self._data
        for part in _split(path):
            if isinstance(node, Mapping):
                if isinstance(part, int):
                    part = str(part)
                if part not in node:
                    return default
                node = node[part]
            elif isinstance(node, tuple):
                try:
                    index = int(part)
                except (TypeError, ValueError):
                    return default
                if not -len(node) <= index < len(node):
                    return default
                node = node[index]
            else:
                return default
        return node

    def to_dict(self) -> dict[str, Any]:
        """Deep, mutable copy of the document."""
        return _thaw(self._data)
