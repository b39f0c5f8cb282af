"""N-dimensional index ranges with begin, end and stride."""

from __future__ import annotations

from typing import Any

from tilespace.vec import Vec


def _as_vec(name: str, value: Any) -> Vec:
    if isinstance(value, Vec):
        return Vec(*value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be a Vec or an integer, got {type(value).__name__}")
    return Vec(value)


def _is_operand(value: Any) -> bool:
    return isinstance(value, Vec) or (isinstance(value, int) and not isinstance(value, bool))


class IdxRange:
    """The indices from ``begin`` (inclusive) to ``end`` (exclusive) in steps of ``stride``.

    ``IdxRange(extent)`` starts at zero with stride one; ``IdxRange(begin,
    end)`` uses stride one. Integers are taken as one-dimensional vectors.
    """

    def __init__(self, begin_or_extent: Any, end: Any = None, stride: Any = None) -> None:
        if end is None:
            if stride is not None:
                raise TypeError("a stride needs both begin and end")
            self.end = _as_vec("extent", begin_or_extent)
            self.begin = Vec.all(len(self.end), 0)
        else:
            self.begin = _as_vec("begin", begin_or_extent)
            self.end = _as_vec("end", end)
        dim = len(self.end)
        self.stride = Vec.all(dim, 1) if stride is None else _as_vec("stride", stride)
        if len(self.begin) != dim or len(self.stride) != dim:
            raise ValueError(
                f"dimension mismatch: begin {len(self.begin)}, end {dim}, stride {len(self.stride)}"
            )

    def dim(self) -> int:
        """Number of dimensions."""
        return len(self.end)

    def distance(self) -> Vec:
        """Extent of the range, ``end - begin``."""
        return self.end - self.begin

    def __mod__(self, rhs: Any) -> "IdxRange":
        """Scale the stride by ``rhs``."""
        if not _is_operand(rhs):
            return NotImplemented
        return IdxRange(self.begin, self.end, self.stride * rhs)

    def __rshift__(self, rhs: Any) -> "IdxRange":
        """Shift begin and end forward by ``rhs``."""
        if not _is_operand(rhs):
            return NotImplemented
        return IdxRange(self.begin + rhs, self.end + rhs, self.stride)

    def __lshift__(self, rhs: Any) -> "IdxRange":
        """Shift begin and end backward by ``rhs``."""
        if not _is_operand(rhs):
            return NotImplemented
        return IdxRange(self.begin - rhs, self.end - rhs, self.stride)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdxRange):
            return NotImplemented
        return self.begin == other.begin and self.end == other.end and self.stride == other.stride

    __hash__ = None  # type: ignore[assignment]

    def to_string(self, separator: str = ",", enclosings: str = "{}") -> str:
        """Render begin, end and stride joined by ``separator`` inside ``enclosings``."""
        begin = finish = ""
        if enclosings:
            begin = enclosings[0]
            finish = enclosings[1 % len(enclosings)]
        parts = (str(self.begin), str(self.end), str(self.stride))
        return begin + separator.join(parts) + finish

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"IdxRange({self.begin!r}, {self.end!r}, {self.stride!r})"