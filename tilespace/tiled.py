"""Distribution of the indices of a range over cooperating threads."""

from __future__ import annotations

import enum
from typing import Any, Iterator

from tilespace.cvec import CVec, iota_cvec
from tilespace.idxrange import IdxRange
from tilespace.threadspace import ThreadSpace, _check_selection
from tilespace.utility import div_ceil
from tilespace.vec import Vec


class Layout(enum.Enum):
    """How indices are shared out between threads."""

    STRIDED = "strided"
    CONTIGUOUS = "contiguous"


class TiledIdxContainer:
    """The indices of ``idx_range`` that belong to one thread.

    Iteration walks the dimensions named by ``selection``; its last entry
    moves fastest and its first entry slowest. Dimensions not selected stay
    at the thread's first index. The container can be iterated repeatedly.
    """

    def __init__(
        self,
        idx_range: IdxRange,
        thread_space: ThreadSpace,
        layout: Layout = Layout.STRIDED,
        selection: CVec | None = None,
    ) -> None:
        if not isinstance(idx_range, IdxRange):
            raise TypeError(f"idx_range must be an IdxRange, got {type(idx_range).__name__}")
        if not isinstance(thread_space, ThreadSpace):
            raise TypeError(f"thread_space must be a ThreadSpace, got {type(thread_space).__name__}")
        if not isinstance(layout, Layout):
            raise TypeError(f"layout must be a Layout, got {type(layout).__name__}")
        dim = idx_range.dim()
        if len(thread_space.thread_idx) != dim:
            raise ValueError(
                f"thread space dim {len(thread_space.thread_idx)} does not match range dim {dim}"
            )
        if selection is None:
            selection = iota_cvec(dim)
        _check_selection(selection, dim)
        self.idx_range = idx_range
        self.thread_space = thread_space
        self.layout = layout
        self.selection = selection

    def select(self, selection: CVec) -> "TiledIdxContainer":
        """Return the same container iterating over the dimensions in ``selection``."""
        return TiledIdxContainer(self.idx_range, self.thread_space, self.layout, selection)

    def __getitem__(self, selection: CVec) -> "TiledIdxContainer":
        return self.select(selection)

    def _bounds(self) -> tuple[Vec, Vec, Vec, Any]:
        thread_idx, num_threads = self.thread_space.map_to(self.selection)
        rng = self.idx_range
        slow = self.selection[0]
        if self.layout is Layout.STRIDED:
            first = thread_idx * rng.stride
            extent = rng.distance()
            stride = num_threads * rng.stride
            end_slow = (rng.begin + rng.distance())[slow]
        else:
            full_extent = rng.distance()
            num_elements = div_ceil(full_extent, rng.stride * num_threads)
            first = thread_idx * num_elements * rng.stride
            extent = full_extent.min(first + num_elements * rng.stride)
            stride = rng.stride
            end_slow = (rng.begin + extent)[slow]
        return first, extent, stride, end_slow

    def __iter__(self) -> Iterator[Vec]:
        first, extent, stride, end_slow = self._bounds()
        offset = self.idx_range.begin
        sel = list(self.selection)
        current = first + offset
        shifted_extent = extent + offset
        stride_sel = [stride[s] for s in sel]
        extent_sel = [shifted_extent[s] for s in sel]
        first_sel = [current[s] for s in sel]
        n = len(sel)

        if n > 1 and any(first_sel[d] >= extent_sel[d] for d in range(1, n)):
            current[sel[0]] = extent_sel[0]

        while current[sel[0]] < end_slow:
            yield Vec(*current)
            for idx in reversed(range(n)):
                s = sel[idx]
                current[s] += stride_sel[idx]
                if idx >= 1 and current[s] >= extent_sel[idx]:
                    current[s] = first_sel[idx]
                else:
                    break

    def __repr__(self) -> str:
        return (
            f"TiledIdxContainer({self.idx_range!r}, {self.thread_space!r}, "
            f"{self.layout}, {self.selection!r})"
        )