import itertools

import pytest

from tilespace.cvec import CVec
from tilespace.idxrange import IdxRange
from tilespace.threadspace import ThreadSpace
from tilespace.tiled import Layout, TiledIdxContainer
from tilespace.vec import Vec


def _single_thread(dim):
    return ThreadSpace(Vec.all(dim, 0), Vec.all(dim, 1))


def _all_threads(count):
    for idx in itertools.product(*(range(c) for c in count)):
        yield ThreadSpace(Vec(*idx), Vec(*count))


def _expected(rng):
    return set(
        itertools.product(*(range(b, e, s) for b, e, s in zip(rng.begin, rng.end, rng.stride)))
    )


def test_single_thread_iterates_row_major():
    rng = IdxRange(Vec(3, 4))
    container = TiledIdxContainer(rng, _single_thread(2), Layout.CONTIGUOUS)
    assert [tuple(v) for v in container] == list(itertools.product(range(3), range(4)))


def test_reversed_selection_iterates_column_major():
    rng = IdxRange(Vec(3, 4))
    container = TiledIdxContainer(rng, _single_thread(2), Layout.STRIDED, CVec(1, 0))
    expected = [(i, j) for j in range(4) for i in range(3)]
    assert [tuple(v) for v in container] == expected


def test_strided_one_dimensional_thread_share():
    rng = IdxRange(Vec(2), Vec(20))
    for t in range(3):
        container = TiledIdxContainer(rng, ThreadSpace(Vec(t), Vec(3)), Layout.STRIDED)
        assert [v[0] for v in container] == list(range(2 + t, 20, 3))


def test_contiguous_one_dimensional_shares_are_blocks():
    rng = IdxRange(Vec(10))
    shares = [
        [v[0] for v in TiledIdxContainer(rng, ThreadSpace(Vec(t), Vec(3)), Layout.CONTIGUOUS)]
        for t in range(3)
    ]
    assert sum(shares, []) == list(range(10))
    for share in shares:
        assert share == list(range(share[0], share[-1] + 1))


@pytest.mark.parametrize("layout", list(Layout))
@pytest.mark.parametrize(
    "rng, count",
    [
        (IdxRange(Vec(10)), Vec(3)),
        (IdxRange(Vec(0), Vec(10), Vec(2)), Vec(2)),
        (IdxRange(Vec(3)), Vec(8)),
        (IdxRange(Vec(5, 7)), Vec(2, 3)),
        (IdxRange(Vec(2, 3), Vec(9, 11), Vec(2, 3)), Vec(3, 2)),
        (IdxRange(Vec(4, 8, 16)), Vec(2, 4, 8)),
        (IdxRange(Vec(1, 1, 1), Vec(4, 6, 5)), Vec(2, 2, 3)),
    ],
)
def test_threads_cover_range_exactly_once(layout, rng, count):
    seen = []
    for ts in _all_threads(count):
        seen.extend(tuple(v) for v in TiledIdxContainer(rng, ts, layout))
    assert len(seen) == len(set(seen))
    assert set(seen) == _expected(rng)


@pytest.mark.parametrize("layout", list(Layout))
def test_selected_subset_of_dimensions(layout):
    rng = IdxRange(Vec(2, 3), Vec(6, 10))
    seen = []
    for ts in _all_threads(Vec(2, 3)):
        seen.extend(tuple(v) for v in TiledIdxContainer(rng, ts, layout).select(CVec(1)))
    assert len(seen) == len(set(seen))
    assert set(seen) == {(2, j) for j in range(3, 10)}


def test_slow_dimension_selection_keeps_others_fixed():
    rng = IdxRange(Vec(4, 8, 16))
    container = TiledIdxContainer(rng, _single_thread(3))[CVec(0)]
    assert [tuple(v) for v in container] == [(i, 0, 0) for i in range(4)]


def test_getitem_matches_select():
    rng = IdxRange(Vec(4, 5))
    container = TiledIdxContainer(rng, _single_thread(2), Layout.CONTIGUOUS)
    assert list(container[CVec(1, 0)]) == list(container.select(CVec(1, 0)))


def test_container_is_reiterable():
    rng = IdxRange(Vec(3, 5))
    container = TiledIdxContainer(rng, ThreadSpace(Vec(1, 0), Vec(2, 2)))
    first = list(container)
    assert first
    assert list(container) == first


def test_yielded_vectors_are_independent():
    rng = IdxRange(Vec(2, 2))
    items = list(TiledIdxContainer(rng, _single_thread(2)))
    items[0][0] = 99
    assert tuple(items[1]) == (0, 1)


def test_thread_without_work_yields_nothing():
    rng = IdxRange(Vec(3))
    container = TiledIdxContainer(rng, ThreadSpace(Vec(5), Vec(8)), Layout.CONTIGUOUS)
    assert list(container) == []


def test_rejects_thread_space_of_other_dimension():
    with pytest.raises(ValueError):
        TiledIdxContainer(IdxRange(Vec(3, 3)), _single_thread(3))


def test_rejects_non_cvec_selection():
    with pytest.raises(TypeError):
        TiledIdxContainer(IdxRange(Vec(3, 3)), _single_thread(2), Layout.STRIDED, (0, 1))


def test_rejects_unknown_layout():
    with pytest.raises(TypeError):
        TiledIdxContainer(IdxRange(Vec(3)), _single_thread(1), "strided")


def test_rejects_selection_out_of_range():
    container = TiledIdxContainer(IdxRange(Vec(3, 3)), _single_thread(2))
    with pytest.raises(IndexError):
        container.select(CVec(2))