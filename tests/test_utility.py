import pytest

from tilespace.utility import div_ceil, int_pow, nth_root_floor
from tilespace.vec import Vec


@pytest.mark.parametrize("a", range(0, 40))
@pytest.mark.parametrize("b", [1, 2, 3, 7, 32])
def test_div_ceil_bounds(a, b):
    q = div_ceil(a, b)
    assert q * b >= a
    assert (q - 1) * b < a


def test_div_ceil_exact_multiple():
    assert div_ceil(32 * 5, 32) == 5


def test_div_ceil_on_vectors_matches_scalars():
    a = Vec(10, 7, 123456)
    b = Vec(3, 7, 256)
    result = div_ceil(a, b)
    assert list(result) == [div_ceil(x, y) for x, y in zip(a, b)]


def test_div_ceil_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        div_ceil(5, 0)


@pytest.mark.parametrize("base", [0, 1, 2, 3, 10, -3])
@pytest.mark.parametrize("n", [0, 1, 2, 5])
def test_int_pow_matches_builtin(base, n):
    assert int_pow(base, n) == base**n


def test_int_pow_zero_exponent_is_one():
    assert int_pow(12345, 0) == 1


def test_int_pow_rejects_float():
    with pytest.raises(TypeError):
        int_pow(2.0, 3)


def test_int_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        int_pow(2, -1)


@pytest.mark.parametrize("value", list(range(0, 70)) + [1000, 4096, 99999])
@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_nth_root_floor_bounds(value, n):
    r = nth_root_floor(value, n)
    assert r**n <= value < (r + 1) ** n


@pytest.mark.parametrize("k", [0, 1, 2, 5, 11])
@pytest.mark.parametrize("n", [2, 3])
def test_nth_root_floor_of_perfect_power(k, n):
    assert nth_root_floor(k**n, n) == k


def test_nth_root_floor_rejects_negative_value():
    with pytest.raises(ValueError):
        nth_root_floor(-4, 2)


def test_nth_root_floor_rejects_float():
    with pytest.raises(TypeError):
        nth_root_floor(4.0, 2)