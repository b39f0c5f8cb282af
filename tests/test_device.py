import gc

import pytest

from tilespace.device import DeviceProperties, make_shared_singleton, reduce_block_count
from tilespace.vec import Vec


def test_device_properties_str():
    props = DeviceProperties("gpu id=0", 80, 32, 1024)
    lines = str(props).splitlines()
    assert lines == [
        "name: gpu id=0",
        "multiProcessorCount: 80",
        "warpSize: 32",
        "maxThreadsPerBlock: 1024",
    ]


def test_device_properties_name_field():
    props = DeviceProperties("host", 1, 1, 1)
    assert props.name == "host"


class _Platform:
    created = 0

    def __init__(self, label="default"):
        type(self).created += 1
        self.label = label


def test_singleton_shared_while_alive():
    first = make_shared_singleton(_Platform, "a")
    second = make_shared_singleton(_Platform, "b")
    assert first is second
    assert second.label == "a"


def test_singleton_recreated_after_release():
    class Local:
        def __init__(self, value):
            self.value = value

    first = make_shared_singleton(Local, value=1)
    assert first.value == 1
    del first
    gc.collect()
    second = make_shared_singleton(Local, value=2)
    assert second.value == 2


def test_singleton_needs_weakref_support():
    with pytest.raises(TypeError):
        make_shared_singleton(int, 3)


@pytest.mark.parametrize(
    "blocks, mp",
    [(Vec(1000, 1), 1), (Vec(64, 64, 64), 4), (Vec(7, 300), 2), (Vec(5000), 80)],
)
def test_reduce_respects_limit(blocks, mp):
    result = reduce_block_count(blocks, mp)
    assert result.product() <= mp * 16
    assert len(result) == len(blocks)
    for before, after in zip(blocks, result):
        assert after <= before


def test_reduce_keeps_small_launch():
    assert reduce_block_count(Vec(2, 3), 1) == Vec(2, 3)


def test_reduce_halves_largest_first():
    assert reduce_block_count(Vec(1000, 1), 1) == Vec(16, 1)


def test_reduce_does_not_mutate_input():
    blocks = Vec(100, 100)
    reduce_block_count(blocks, 1)
    assert blocks == Vec(100, 100)


def test_reduce_rejects_zero_processors():
    with pytest.raises(ValueError):
        reduce_block_count(Vec(4), 0)


def test_reduce_rejects_non_vec():
    with pytest.raises(TypeError):
        reduce_block_count([4, 4], 1)