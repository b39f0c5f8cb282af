"""Device description, shared singletons and launch-size reduction."""

from __future__ import annotations

import threading
import weakref
from dataclasses import dataclass
from typing import Any, Callable

from tilespace.utility import div_ceil
from tilespace.vec import Vec


@dataclass
class DeviceProperties:
    """Properties of a compute device."""

    name: str
    multi_processor_count: int
    warp_size: int
    max_threads_per_block: int

    def __str__(self) -> str:
        return (
            f"name: {self.name}\n"
            f"multiProcessorCount: {self.multi_processor_count}\n"
            f"warpSize: {self.warp_size}\n"
            f"maxThreadsPerBlock: {self.max_threads_per_block}\n"
        )


_singletons: "weakref.WeakValueDictionary[Any, Any]" = weakref.WeakValueDictionary()
_singleton_lock = threading.Lock()


def make_shared_singleton(factory: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Return the live instance made by ``factory``, creating it if none exists.

    Only a weak reference is kept: once every user has dropped the instance,
    the next call creates a new one from the given arguments.
    """
    with _singleton_lock:
        existing = _singletons.get(factory)
        if existing is not None:
            return existing
        instance = factory(*args, **kwargs)
        _singletons[factory] = instance
        return instance


def reduce_block_count(num_blocks: Vec, multi_processor_count: int) -> Vec:
    """Halve the largest block count until at most 16 blocks per processor remain.

    The first of several equally large components is halved, rounding up.
    The input vector is left unchanged.
    """
    if not isinstance(num_blocks, Vec):
        raise TypeError(f"num_blocks must be a Vec, got {type(num_blocks).__name__}")
    if isinstance(multi_processor_count, bool) or not isinstance(multi_processor_count, int):
        raise TypeError("multi_processor_count must be an integer")
    if multi_processor_count < 1:
        raise ValueError("multi_processor_count must be at least 1")
    for v in num_blocks:
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            raise ValueError("block counts must be non-negative integers")
    max_blocks = multi_processor_count * 16
    blocks = Vec(*num_blocks)
    while blocks.product() > max_blocks:
        largest = max(range(len(blocks)), key=lambda i: (blocks[i], -i))
        blocks[largest] = div_ceil(blocks[largest], 2)
    return blocks