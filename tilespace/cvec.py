"""Immutable integer vectors and set-like joins on them."""

from __future__ import annotations

from typing import Any, Callable

from tilespace.vec import Vec


class CVec(Vec):
    """An immutable vector of integers, usable as a dimension selection.

    Unlike :class:`Vec`, a ``CVec`` may be empty; joins that filter out
    every value produce one.
    """

    def __init__(self, *values: int) -> None:
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"CVec components must be integers, got {type(v).__name__}")
        self._data = tuple(values)

    def __setitem__(self, key: int, value: Any) -> None:
        raise TypeError("CVec components cannot be changed")

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"CVec({', '.join(repr(v) for v in self)})"

    def _inplace(self, other: Any, op: Callable[[Any, Any], Any]):
        # Augmented assignment rebinds to a new vector instead of mutating.
        return self._binary(other, op)

    def product(self) -> int:
        """Product of all components."""
        if not self._data:
            raise ValueError("an empty CVec has no product")
        return super().product()

    def sum(self) -> int:
        """Sum of all components."""
        if not self._data:
            raise ValueError("an empty CVec has no sum")
        return super().sum()


def _require_cvec(name: str, value: Any) -> None:
    if not isinstance(value, CVec):
        raise TypeError(f"{name} must be a CVec, got {type(value).__name__}")


def iota_cvec(dim: int) -> CVec:
    """Return the selection ``0, 1, ..., dim - 1``."""
    if isinstance(dim, bool) or not isinstance(dim, int):
        raise TypeError(f"dim must be an integer, got {type(dim).__name__}")
    if dim < 0:
        raise ValueError("dim must not be negative")
    return CVec(*range(dim))


def left_join(left: CVec, right: CVec) -> CVec:
    """Values of ``left`` that do not occur in ``right``, in ``left`` order."""
    _require_cvec("left", left)
    _require_cvec("right", right)
    return CVec(*(v for v in left if v not in right))


def right_join(left: CVec, right: CVec) -> CVec:
    """Values of ``right`` that do not occur in ``left``, in ``right`` order."""
    _require_cvec("left", left)
    _require_cvec("right", right)
    return CVec(*(v for v in right if v not in left))


def inner_join(left: CVec, right: CVec) -> CVec:
    """Values of ``right`` that also occur in ``left``, in ``right`` order."""
    _require_cvec("left", left)
    _require_cvec("right", right)
    return CVec(*(v for v in right if v in left))