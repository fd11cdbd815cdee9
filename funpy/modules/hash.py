"""Curried mapping helpers. Every argument defaults to the placeholder.

Mappings are never mutated; `put` returns a new dict.
"""

from __future__ import annotations

from typing import Any, Mapping

from funpy.operations import OperationTable
from funpy.types.placeholder import Placeholder as _

_ops = OperationTable("hash")


def _hash(mapping: Mapping[Any, Any]) -> dict[Any, Any]:
    return dict(mapping)


@_ops.implements("fetch")
def _fetch(key, mapping):
    # KeyError propagates for a missing key
    return _hash(mapping)[key]


@_ops.implements("fetch_with")
def _fetch_with(key, fallback, mapping):
    items = _hash(mapping)
    if key in items:
        return items[key]
    return fallback(key)


@_ops.implements("get")
def _get(key, mapping):
    return _hash(mapping).get(key)


@_ops.implements("put")
def _put(key, value, mapping):
    items = _hash(mapping)
    items[key] = value
    return items


def fetch(key=_, mapping=_):
    """Value stored under `key`; raises KeyError when it is missing."""
    return _ops.curried("fetch", key, mapping)


def fetch_with(key=_, fallback=_, mapping=_):
    """Value stored under `key`, or `fallback(key)` when it is missing."""
    return _ops.curried("fetch_with", key, fallback, mapping)


def get(key=_, mapping=_):
    """Value stored under `key`, or None."""
    return _ops.curried("get", key, mapping)


def put(key=_, value=_, mapping=_):
    """Copy of `mapping` with `key` set to `value`."""
    return _ops.curried("put", key, value, mapping)
