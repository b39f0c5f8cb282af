# tilespace

Pure-Python tools for describing and walking N-dimensional index spaces.
They cover the ways data-parallel code splits work into frames, blocks and
threads. The package has no dependencies outside the standard library.

## Install

```
pip install tilespace
```

To run the test suite, install the `test` extra and run `pytest`.

## Modules

- `tilespace.vec`
  - `Vec` is a mutable vector with at least one component. Index 0 is the
    slowest dimension. `x()`, `y()`, `z()` and `w()` count from the last
    component, and `back()` is the last component.
  - It has element-wise `+ - * / // %`, negation and in-place forms. Both
    the vector and the scalar forms are supported.
  - Comparisons (`< <= > >=`) return a `Vec` of booleans, and `==` compares
    the whole vector.
  - Methods: `from_generator`, `all`, `dim`, `product`, `sum`, `min`,
    `revert`, `rshrink` (with an optional wrapping `start_idx`),
    `erase_back`, `remove`, `to_string(separator, enclosings)` and
    `swizzle`. Indexing with a `Vec` of indices also swizzles.
  - `ref(selection)` returns a `VecRef`. This is a view whose components
    alias the selected components of the original. `VecRef.assign` writes
    a scalar or a vector through the view, and `to_vec` makes an
    independent copy.
- `tilespace.vecops`
  - `linearize(dim, idx)` maps an N-dimensional integer index to a linear
    one. `dim` may have N or N-1 components.
  - `map_to_nd(dim, linear_idx)` does the reverse.
  - `p_cast(to_type, vec)` converts every component. It returns the input
    unchanged when every component already has that type.
  - `lp_cast` does the same, but raises `ValueError` if any value changes.
- `tilespace.cvec`
  - `CVec` is an immutable, hashable vector of integers used as a
    dimension selection. It may be empty.
  - `iota_cvec(dim)` gives `0 … dim-1`.
  - `left_join(l, r)` gives the values of `l` that are not in `r`.
  - `right_join(l, r)` gives the values of `r` that are not in `l`.
  - `inner_join(l, r)` gives the values of `r` that are also in `l`.
- `tilespace.idxrange`
  - `IdxRange(extent)`, `IdxRange(begin, end)` or
    `IdxRange(begin, end, stride)` builds a range. Integers count as
    one-dimensional vectors.
  - `dim()`, `distance()` and `to_string()` describe the range.
  - `%` scales the stride, `>>` shifts begin and end forward, and `<<`
    shifts them back.
- `tilespace.threadspace`
  - `ThreadSpace(thread_idx, thread_count)` unpacks as a pair.
  - `map_to(selection)` folds every dimension that is not selected into
    the first selected one. It returns a new object.
  - `to_string()` describes the thread space.
- `tilespace.tiled`
  - `TiledIdxContainer(idx_range, thread_space, layout, selection)` yields
    the indices of the range that belong to one thread.
  - The layout is `Layout.STRIDED` or `Layout.CONTIGUOUS`.
  - `select(selection)`, or indexing with a `CVec`, changes which
    dimensions are iterated. The last entry of the selection moves fastest.
  - The container can be iterated more than once.
- `tilespace.utility` provides `div_ceil` (which also works on `Vec`),
  `int_pow` and `nth_root_floor`.
- `tilespace.atomic`
  - `atomic_add`, `atomic_sub`, `atomic_min`, `atomic_max`, `atomic_exch`,
    `atomic_inc`, `atomic_dec`, `atomic_and`, `atomic_or`, `atomic_xor` and
    `atomic_cas(target, key, compare, value)` update `target[key]` and
    return the old value.
  - All of them run under one shared lock.
  - Floats are compared by bit pattern in `atomic_cas`.
  - `Hierarchy` names the levels grids, blocks and threads.
- `tilespace.memory`
  - `calculate_pitches_from_extents(extents, elem_size)` and
    `calculate_pitches(extents, row_pitch_bytes, elem_size)` compute byte
    pitches.
  - `Data` holds data, extents, pitches and a deleter. The deleter runs
    exactly once: on `close()`, at the end of a `with` block, or at
    garbage collection.
- `tilespace.device`
  - `DeviceProperties` is a dataclass with a multi-line `str`.
  - `make_shared_singleton(factory, *args, **kwargs)` keeps one live
    instance per factory, through a weak reference.
  - `reduce_block_count(num_blocks, multi_processor_count)` halves the
    largest block count until at most 16 blocks per processor remain.
- `tilespace.uniqueid`
  - `unique_id(file_name, function_name, line, column)` returns a
    deterministic 64-bit id.
  - `unique_id_here()` returns the id of its call site.

## Example

```python
from tilespace.vec import Vec
from tilespace.vecops import linearize, map_to_nd
from tilespace.idxrange import IdxRange
from tilespace.threadspace import ThreadSpace
from tilespace.tiled import TiledIdxContainer, Layout

extent = Vec(4, 8, 16)
idx = map_to_nd(extent, 100)          # Vec(0, 6, 4)
assert linearize(extent, idx) == 100
print(extent.product(), extent.x(), extent.to_string(";", "[]"))  # 512 16 [4;8;16]

# indices handled by thread 1 of 4 over the range 0..10, strided
ts = ThreadSpace(Vec(1), Vec(4))
print([int(i) for i in TiledIdxContainer(IdxRange(10), ts, Layout.STRIDED)])  # [1, 5, 9]
```

## What it does not do

This package only computes indices, shapes and pitches. It does not
allocate memory on devices or launch work on them. It does not schedule or
run threads, and it has no command-line program. `Data` only records memory
that the caller provides, together with the caller's deleter.