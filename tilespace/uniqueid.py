"""Deterministic 64-bit identifiers derived from a source location."""

from __future__ import annotations

import inspect

_MASK = (1 << 64) - 1
_SEED = 0xC6A4A7935BD1E995
_GOLDEN = 0x9E3779B9


def _combine(seed: int, value: int) -> int:
    return (seed ^ ((value + _GOLDEN + (seed << 6) + (seed >> 2)) & _MASK)) & _MASK


def _combine_text(seed: int, text: str) -> int:
    for byte in text.encode("utf-8"):
        # characters are treated as signed 8-bit values widened to 64 bits
        value = byte if byte < 128 else (byte - 256) & _MASK
        seed = _combine(seed, value)
    return seed


def _require_count(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def unique_id(file_name: str, function_name: str, line: int, column: int) -> int:
    """Return the 64-bit id of a source location.

    The same location always gives the same id.
    """
    if not isinstance(file_name, str) or not isinstance(function_name, str):
        raise TypeError("file_name and function_name must be strings")
    _require_count("line", line)
    _require_count("column", column)
    seed = _combine_text(_SEED, file_name)
    seed = _combine_text(seed, function_name)
    seed = _combine(seed, line & _MASK)
    return _combine(seed, (column << 32) & _MASK)


def unique_id_here() -> int:
    """Return the id of the place this function is called from.

    The column is used where the interpreter reports it (Python 3.11+).
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is None:
            raise RuntimeError("no calling frame available")
        info = inspect.getframeinfo(caller, context=0)
        positions = getattr(info, "positions", None)
        column = 0
        if positions is not None and positions.col_offset is not None:
            column = positions.col_offset + 1
        return unique_id(caller.f_code.co_filename, caller.f_code.co_name, info.lineno, column)
    finally:
        del frame, caller