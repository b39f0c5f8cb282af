"""A thread's position inside a group of cooperating threads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from tilespace.cvec import CVec, iota_cvec, left_join
from tilespace.vec import Vec


def _check_selection(selection: Any, dim: int) -> None:
    if not isinstance(selection, CVec):
        raise TypeError(f"selection must be a CVec, got {type(selection).__name__}")
    if len(selection) == 0:
        raise ValueError("selection must name at least one dimension")
    if len(selection) > dim:
        raise ValueError(f"selection of {len(selection)} dimensions exceeds thread space dim {dim}")
    for d in selection:
        if not 0 <= d < dim:
            raise IndexError(f"selected dimension {d} out of range for dim {dim}")


@dataclass
class ThreadSpace:
    """The index of one thread and the number of threads, per dimension.

    Unpacks as ``thread_idx, thread_count``.
    """

    thread_idx: Vec
    thread_count: Vec

    def __post_init__(self) -> None:
        if not isinstance(self.thread_idx, Vec) or not isinstance(self.thread_count, Vec):
            raise TypeError("thread_idx and thread_count must be Vec instances")
        if len(self.thread_idx) != len(self.thread_count):
            raise ValueError(
                f"dimension mismatch: {len(self.thread_idx)} != {len(self.thread_count)}"
            )

    def __iter__(self) -> Iterator[Vec]:
        yield self.thread_idx
        yield self.thread_count

    def map_to(self, selection: CVec) -> "ThreadSpace":
        """Fold every dimension not in ``selection`` into its first selected dimension.

        Folded dimensions get index 0 and count 1; the first selected
        dimension absorbs their index and count. The original is unchanged.
        """
        dim = len(self.thread_idx)
        _check_selection(selection, dim)
        thread_idx = Vec(*self.thread_idx)
        thread_count = Vec(*self.thread_count)
        if len(selection) == dim:
            return ThreadSpace(thread_idx, thread_count)

        not_selected = left_join(iota_cvec(dim), selection)
        target = selection[0]
        for d in not_selected:
            old = thread_idx[d]
            thread_idx[d] = 0
            thread_idx[target] += old * thread_count[target]
        for d in not_selected:
            old = thread_count[d]
            thread_count[d] = 1
            thread_count[target] *= old
        return ThreadSpace(thread_idx, thread_count)

    def to_string(self, separator: str = ",", enclosings: str = "{}") -> str:
        """Render index and count joined by ``separator`` inside ``enclosings``."""
        begin = end = ""
        if enclosings:
            begin = enclosings[0]
            end = enclosings[1 % len(enclosings)]
        return begin + str(self.thread_idx) + separator + str(self.thread_count) + end

    def __str__(self) -> str:
        return self.to_string()