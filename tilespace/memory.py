"""Pitch computation and ownership of allocated N-dimensional data."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Optional

from tilespace.vec import Vec


def _require_extents(extents: Any) -> None:
    if not isinstance(extents, Vec):
        raise TypeError(f"extents must be a Vec, got {type(extents).__name__}")


def _require_size(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def calculate_pitches_from_extents(extents: Vec, elem_size: int) -> Vec:
    """Return the byte distance to the next element in each dimension.

    The data is taken to be densely packed: the last pitch is ``elem_size``
    and every other pitch spans one full row of the next faster dimension.
    """
    _require_extents(extents)
    _require_size("elem_size", elem_size)
    pitches = [elem_size]
    for extent in reversed(list(extents)[1:]):
        pitches.insert(0, extent * pitches[0])
    return Vec(*pitches)


def calculate_pitches(extents: Vec, row_pitch_bytes: int, elem_size: int) -> Vec:
    """Return the byte pitches for data whose rows are ``row_pitch_bytes`` apart.

    Needs at least two dimensions. Dimensions slower than the row dimension
    are packed densely on top of the row pitch.
    """
    _require_extents(extents)
    _require_size("row_pitch_bytes", row_pitch_bytes)
    _require_size("elem_size", elem_size)
    dim = len(extents)
    if dim < 2:
        raise ValueError("row pitches need at least two dimensions")
    pitches = [row_pitch_bytes, elem_size]
    for extent in reversed(list(extents)[1:dim - 1]):
        pitches.insert(0, extent * pitches[0])
    return Vec(*pitches)


def _release(deleter: Optional[Callable[[Any], Any]], data: Any) -> None:
    if deleter is not None:
        deleter(data)


class Data:
    """Allocated memory together with its shape and the means to release it.

    The deleter is called with ``data`` exactly once: on :meth:`close`, on
    leaving a ``with`` block, or when the object is garbage collected.
    """

    def __init__(
        self,
        base: Any,
        data: Any,
        extents: Vec,
        pitches: Vec,
        deleter: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        _require_extents(extents)
        if not isinstance(pitches, Vec):
            raise TypeError(f"pitches must be a Vec, got {type(pitches).__name__}")
        if len(pitches) != len(extents):
            raise ValueError(f"dimension mismatch: {len(extents)} != {len(pitches)}")
        self.base = base
        self.data = data
        self.extents = extents
        self.pitches = pitches
        self._finalizer = weakref.finalize(self, _release, deleter, data)

    @property
    def closed(self) -> bool:
        """Whether the memory has been released."""
        return not self._finalizer.alive

    def close(self) -> None:
        """Release the memory; further calls do nothing."""
        self._finalizer()

    def __enter__(self) -> "Data":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"Data(extents={self.extents}, pitches={self.pitches}, {state})"