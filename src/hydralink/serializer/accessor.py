# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generic read and write access to objects along dotted property paths."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from hydralink.errors import PropertyPathError
from hydralink.model.schema import FieldAccess, MethodCall

# ###############
# Public Interface
# ###############


class PropertyAccessor:
    """Resolves paths such as ``address.city`` or ``tags.0`` on objects.

    Each path segment is resolved as a mapping key, a sequence index, a
    ``get_<name>()`` / ``set_<name>(value)`` method, or a plain attribute,
    in that order.
    """

    def read(self, obj: object, path: str) -> Any:
        """Return the value at *path* on *obj*.

        Raises:
            PropertyPathError: If a segment cannot be resolved.
        """
        current = obj
        for segment in _segments(path):
            current = _read_segment(current, segment, path)
        return current

    def write(
        self,
        obj: object,
        path: str,
        value: Any,
        setter: FieldAccess | MethodCall | None = None,
    ) -> None:
        """Write *value* at *path* on *obj*.

        All but the last segment are read; the last one is written on the
        object they lead to, through *setter* when given.

        Raises:
            PropertyPathError: If a segment cannot be resolved or written.
        """
        *parents, leaf = _segments(path)
        owner = obj
        for segment in parents:
            owner = _read_segment(owner, segment, path)

        try:
            if setter is not None:
                setter.assign(owner, value)
            else:
                _write_segment(owner, leaf, value)
        except (AttributeError, TypeError) as exc:
            raise PropertyPathError(f"Cannot write '{path}' on {type(obj).__qualname__}: {exc}") from exc


# ################
# Implementation
# ################


def _segments(path: str) -> list[str]:
    segments = path.split(".")
    if not path or any(not s for s in segments):
        raise PropertyPathError(f"Invalid property path '{path}'")
    return segments


def _read_segment(obj: Any, segment: str, path: str) -> Any:
    if isinstance(obj, Mapping):
        if segment not in obj:
            raise PropertyPathError(f"Cannot resolve '{segment}' of '{path}': missing key")
        return obj[segment]
    if isinstance(obj, Sequence) and not isinstance(obj, str) and segment.isdigit():
        try:
            return obj[int(segment)]
        except IndexError:
            raise PropertyPathError(f"Cannot resolve '{segment}' of '{path}': index out of range") from None
    getter = getattr(obj, f"get_{segment}", None)
    if callable(getter):
        return getter()
    try:
        return getattr(obj, segment)
    except AttributeError:
        raise PropertyPathError(
            f"Cannot resolve '{segment}' of '{path}' on {type(obj).__qualname__}"
        ) from None


def _write_segment(obj: Any, segment: str, value: Any) -> None:
    if isinstance(obj, MutableMapping):
        obj[segment] = value
        return
    setter = getattr(obj, f"set_{segment}", None)
    if callable(setter):
        setter(value)
        return
    setattr(obj, segment, value)
