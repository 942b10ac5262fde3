"""Iterate over a mapping in the order of its keys."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def _ordered(mapping: Mapping[Any, V], reverse: bool) -> Iterator[tuple[Any, V]]:
    for key in sorted(mapping, reverse=reverse):
        yield key, mapping[key]


def ascending(mapping: Mapping[K, V]) -> Iterator[tuple[K, V]]:
    """Yield the key-value pairs of ``mapping`` in ascending key order."""
    return _ordered(mapping, reverse=False)


def descending(mapping: Mapping[K, V]) -> Iterator[tuple[K, V]]:
    """Yield the key-value pairs of ``mapping`` in descending key order."""
    return _ordered(mapping, reverse=True)