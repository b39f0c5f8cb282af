"""Small integer helpers shared by index computations."""

from __future__ import annotations

from typing import Any


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def div_ceil(a, b):
    """Return the ceiling of ``a / b``.

    Works on integers and elementwise on vectors.
    """
    return (a + b - 1) // b


def int_pow(base: int, n: int) -> int:
    """Return ``base`` raised to the non-negative integer power ``n``."""
    _require_int("base", base)
    _require_int("n", n)
    if n < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(n):
        result *= base
    return result


def nth_root_floor(value: int, n: int) -> int:
    """Return the floor of the ``n``-th root of ``value``, in integers."""
    _require_int("value", value)
    _require_int("n", n)
    if value < 0:
        raise ValueError("value must not be negative")
    if n < 0:
        raise ValueError("root degree must not be negative")
    low, high = 0, value + 1
    while low != high - 1:
        mid = (low + high) // 2
        if int_pow(mid, n) <= value:
            low = mid
        else:
            high = mid
    return low