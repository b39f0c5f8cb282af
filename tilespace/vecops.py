"""Index arithmetic and value-type casts on :class:`~tilespace.vec.Vec`."""

from __future__ import annotations

from typing import Any, Callable

from tilespace.vec import Vec


def _require_int_vec(name: str, value: Any) -> None:
    if not isinstance(value, Vec):
        raise TypeError(f"{name} must be a Vec, got {type(value).__name__}")
    for v in value:
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"{name} must hold integers, got {type(v).__name__}")


def linearize(dim: Vec, idx: Vec) -> int:
    """Return the linear index of ``idx`` within the index space ``dim``.

    ``dim`` may have the same number of components as ``idx`` or one less;
    its slowest component is never needed. Indices outside ``dim`` give
    linear indices outside the domain.
    """
    _require_int_vec("dim", dim)
    _require_int_vec("idx", idx)
    n = len(idx)
    if n == 1:
        if len(dim) != 1:
            raise ValueError(f"dimension mismatch: {len(dim)} != 1")
        return idx.x()
    if len(dim) == n:
        dim = dim.rshrink(n - 1)
    elif len(dim) != n - 1:
        raise ValueError(f"dim must have {n} or {n - 1} components, got {len(dim)}")
    linear = idx[0]
    for extent, component in zip(dim, list(idx)[1:]):
        linear = linear * extent + component
    return linear


def map_to_nd(dim: Vec, linear_idx: int) -> Vec:
    """Map a linear index to an N-dimensional index within ``dim``."""
    _require_int_vec("dim", dim)
    if isinstance(linear_idx, bool) or not isinstance(linear_idx, int):
        raise TypeError(f"linear_idx must be an integer, got {type(linear_idx).__name__}")
    n = len(dim)
    if n == 1:
        return Vec(linear_idx)
    # pitches[d] is the number of elements spanned by one step in dimension d
    pitches = [dim.back()]
    for extent in reversed(list(dim)[1:-1]):
        pitches.insert(0, extent * pitches[0])
    result = []
    for pitch in pitches:
        component = linear_idx // pitch
        result.append(component)
        linear_idx -= pitch * component
    result.append(linear_idx)
    return Vec(*result)


def p_cast(to_type: Callable[[Any], Any], value: Vec) -> Vec:
    """Return ``value`` with every component converted by ``to_type``.

    When every component already has type ``to_type`` the input is
    returned unchanged.
    """
    if not isinstance(value, Vec):
        raise TypeError(f"value must be a Vec, got {type(value).__name__}")
    if isinstance(to_type, type) and all(type(v) is to_type for v in value):
        return value
    return Vec.from_generator(len(value), lambda i: to_type(value[i]))


def lp_cast(to_type: Callable[[Any], Any], value: Vec) -> Vec:
    """Like :func:`p_cast`, but raise ``ValueError`` if any component changes."""
    result = p_cast(to_type, value)
    for before, after in zip(value, result):
        if after != before:
            raise ValueError(f"converting {before!r} with {to_type!r} loses precision")
    return result