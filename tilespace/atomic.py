"""Read-modify-write operations on one slot of a container.

Each operation stores its result in ``target[key]`` and returns the value
held there before. All operations share one lock, so they are atomic with
respect to each other across threads.
"""

from __future__ import annotations

import enum
import struct
import threading
from typing import Any, Callable, MutableMapping, MutableSequence, Union

Target = Union[MutableSequence[Any], MutableMapping[Any, Any]]

_lock = threading.Lock()


class Hierarchy(enum.Enum):
    """Levels of the parallelism hierarchy an atomic operation spans."""

    GRIDS = "grids"
    BLOCKS = "blocks"
    THREADS = "threads"


def _update(target: Target, key: Any, compute: Callable[[Any], Any]) -> Any:
    with _lock:
        old = target[key]
        target[key] = compute(old)
        return old


def atomic_add(target: Target, key: Any, value: Any) -> Any:
    """Add ``value``; return the old value."""
    return _update(target, key, lambda old: old + value)


def atomic_sub(target: Target, key: Any, value: Any) -> Any:
    """Subtract ``value``; return the old value."""
    return _update(target, key, lambda old: old - value)


def atomic_min(target: Target, key: Any, value: Any) -> Any:
    """Store the smaller of the old value and ``value``; return the old value."""
    return _update(target, key, lambda old: min(old, value))


def atomic_max(target: Target, key: Any, value: Any) -> Any:
    """Store the larger of the old value and ``value``; return the old value."""
    return _update(target, key, lambda old: max(old, value))


def atomic_exch(target: Target, key: Any, value: Any) -> Any:
    """Store ``value``; return the old value."""
    return _update(target, key, lambda old: value)


def atomic_inc(target: Target, key: Any, value: Any) -> Any:
    """Increment up to ``value``, then wrap to 0; return the old value."""
    return _update(target, key, lambda old: 0 if old >= value else old + 1)


def atomic_dec(target: Target, key: Any, value: Any) -> Any:
    """Decrement down to 0, then wrap to ``value``; return the old value.

    An old value above ``value`` is also reset to ``value``.
    """
    return _update(target, key, lambda old: value if old == 0 or old > value else old - 1)


def atomic_and(target: Target, key: Any, value: Any) -> Any:
    """Bitwise and with ``value``; return the old value."""
    return _update(target, key, lambda old: old & value)


def atomic_or(target: Target, key: Any, value: Any) -> Any:
    """Bitwise or with ``value``; return the old value."""
    return _update(target, key, lambda old: old | value)


def atomic_xor(target: Target, key: Any, value: Any) -> Any:
    """Bitwise exclusive or with ``value``; return the old value."""
    return _update(target, key, lambda old: old ^ value)


def _same(old: Any, compare: Any) -> bool:
    if isinstance(old, float) and isinstance(compare, float):
        # floating point values are compared by their bit patterns
        return struct.pack("<d", old) == struct.pack("<d", compare)
    return old == compare


def atomic_cas(target: Target, key: Any, compare: Any, value: Any) -> Any:
    """Store ``value`` if the old value equals ``compare``; return the old value."""
    return _update(target, key, lambda old: value if _same(old, compare) else old)