"""Fixed-size N-dimensional vectors with elementwise arithmetic."""

from __future__ import annotations

import numbers
import operator
from typing import Any, Callable, Iterable, Iterator, Sequence

_NAMED_AXES = {"x": 0, "y": 1, "z": 2, "w": 3}


class Vec:
    """A mutable vector with at least one component.

    Index 0 is the slowest dimension; ``x()`` names the last component,
    ``y()`` the one before it, and so on.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *values: Any) -> None:
        if not values:
            raise ValueError("a Vec needs at least one component")
        self._data = list(values)

    # construction -------------------------------------------------------

    @classmethod
    def from_generator(cls, dim: int, generator: Callable[[int], Any]) -> "Vec":
        """Build a vector whose component ``i`` is ``generator(i)``."""
        return Vec(*(generator(i) for i in range(dim)))

    @classmethod
    def all(cls, dim: int, value: Any) -> "Vec":
        """Build a vector with every component set to ``value``."""
        return Vec(*([value] * dim))

    # sequence protocol --------------------------------------------------

    def dim(self) -> int:
        """Number of components."""
        return len(self)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        for i in range(len(self)):
            yield self[i]

    def __getitem__(self, key):
        if isinstance(key, Vec):
            return self.swizzle(key)
        if isinstance(key, int):
            return self._data[key]
        raise TypeError(f"invalid index type {type(key).__name__}")

    def __setitem__(self, key: int, value: Any) -> None:
        if not isinstance(key, int):
            raise TypeError(f"invalid index type {type(key).__name__}")
        self._data[key] = value

    def __int__(self) -> int:
        if len(self) != 1:
            raise TypeError("only a one-dimensional Vec converts to a scalar")
        return int(self[0])

    def __float__(self) -> float:
        if len(self) != 1:
            raise TypeError("only a one-dimensional Vec converts to a scalar")
        return float(self[0])

    # named access -------------------------------------------------------

    def _named(self, name: str) -> Any:
        offset = _NAMED_AXES[name]
        if len(self) < offset + 1:
            raise IndexError(f"{name}() needs a Vec of at least {offset + 1} components")
        return self[len(self) - 1 - offset]

    def x(self) -> Any:
        """Last component (fastest dimension)."""
        return self._named("x")

    def y(self) -> Any:
        """Second to last component."""
        return self._named("y")

    def z(self) -> Any:
        """Third to last component."""
        return self._named("z")

    def w(self) -> Any:
        """Fourth to last component."""
        return self._named("w")

    def back(self) -> Any:
        """Last component."""
        return self[len(self) - 1]

    # reshaping ----------------------------------------------------------

    def revert(self) -> "Vec":
        """Return the components in reverse order."""
        return Vec(*reversed(list(self)))

    def rshrink(self, num_elements: int, start_idx: int | None = None) -> "Vec":
        """Keep ``num_elements`` components, taken from the back.

        Without ``start_idx`` the highest indices are kept. With it, the
        component at ``start_idx`` becomes the last one and indexing wraps
        around at the front of the vector.
        """
        dim = len(self)
        if not 0 < num_elements <= dim:
            raise ValueError(f"cannot shrink a Vec of {dim} components to {num_elements}")
        if start_idx is None:
            return Vec(*list(self)[dim - num_elements:])
        picked = [self[(dim + start_idx - i) % dim] for i in range(num_elements)]
        return Vec(*reversed(picked))

    def erase_back(self) -> "Vec":
        """Return the vector without its last component."""
        if len(self) < 2:
            raise ValueError("cannot erase from a one-dimensional Vec")
        return Vec(*list(self)[:-1])

    def remove(self, dim_to_remove: int) -> "Vec":
        """Return the vector without the component at ``dim_to_remove``."""
        dim = len(self)
        if dim < 2:
            raise ValueError("cannot remove a component from a one-dimensional Vec")
        if not 0 <= dim_to_remove < dim:
            raise IndexError(f"component {dim_to_remove} out of range for dim {dim}")
        return Vec(*(v for i, v in enumerate(self) if i != dim_to_remove))

    # reductions ---------------------------------------------------------

    def product(self) -> Any:
        """Product of all components."""
        values = iter(self)
        result = next(values)
        for v in values:
            result *= v
        return result

    def sum(self) -> Any:
        """Sum of all components."""
        values = iter(self)
        result = next(values)
        for v in values:
            result += v
        return result

    def min(self, other: "Vec") -> "Vec":
        """Elementwise minimum with another vector."""
        self._check_dim(other)
        return Vec(*(min(a, b) for a, b in zip(self, other)))

    # formatting ---------------------------------------------------------

    def to_string(self, separator: str = ",", enclosings: str = "{}") -> str:
        """Render the components joined by ``separator``.

        ``enclosings`` gives the opening and closing symbol; a single
        character is used for both, an empty string for none.
        """
        begin = end = ""
        if enclosings:
            begin = enclosings[0]
            end = enclosings[1 % len(enclosings)]
        return begin + separator.join(str(v) for v in self) + end

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Vec({', '.join(repr(v) for v in self)})"

    # selection ----------------------------------------------------------

    def swizzle(self, selection: Iterable[int]) -> "Vec":
        """Return a new vector made of the components at ``selection``."""
        return Vec(*(self[int(i)] for i in selection))

    def ref(self, selection: Iterable[int]) -> "VecRef":
        """Return a view whose components alias the selected ones."""
        return VecRef(self, selection)

    # comparison ---------------------------------------------------------

    def _check_dim(self, other: "Vec") -> None:
        if len(self) != len(other):
            raise ValueError(f"dimension mismatch: {len(self)} != {len(other)}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # elementwise operators ----------------------------------------------

    def _pairs(self, other: Any) -> list[tuple[Any, Any]] | None:
        if isinstance(other, Vec):
            self._check_dim(other)
            return list(zip(self, other))
        if isinstance(other, numbers.Number):
            return [(a, other) for a in self]
        return None

    def _binary(self, other: Any, op: Callable[[Any, Any], Any], reflect: bool = False):
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        if reflect:
            return Vec(*(op(b, a) for a, b in pairs))
        return Vec(*(op(a, b) for a, b in pairs))

    def _inplace(self, other: Any, op: Callable[[Any, Any], Any]):
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        for i, (a, b) in enumerate(pairs):
            self[i] = op(a, b)
        return self

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __radd__(self, other):
        return self._binary(other, operator.add, reflect=True)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __rsub__(self, other):
        return self._binary(other, operator.sub, reflect=True)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        return self._binary(other, operator.mul, reflect=True)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._binary(other, operator.truediv, reflect=True)

    def __floordiv__(self, other):
        return self._binary(other, operator.floordiv)

    def __rfloordiv__(self, other):
        return self._binary(other, operator.floordiv, reflect=True)

    def __mod__(self, other):
        return self._binary(other, operator.mod)

    def __rmod__(self, other):
        return self._binary(other, operator.mod, reflect=True)

    def __lt__(self, other):
        return self._binary(other, operator.lt)

    def __le__(self, other):
        return self._binary(other, operator.le)

    def __gt__(self, other):
        return self._binary(other, operator.gt)

    def __ge__(self, other):
        return self._binary(other, operator.ge)

    def __neg__(self) -> "Vec":
        return Vec(*(-v for v in self))

    def __iadd__(self, other):
        return self._inplace(other, operator.add)

    def __isub__(self, other):
        return self._inplace(other, operator.sub)

    def __imul__(self, other):
        return self._inplace(other, operator.mul)

    def __itruediv__(self, other):
        return self._inplace(other, operator.truediv)

    def __ifloordiv__(self, other):
        return self._inplace(other, operator.floordiv)


class VecRef(Vec):
    """A vector whose components are aliases of components of another vector."""

    def __init__(self, target: Vec, selection: Iterable[int]) -> None:
        indices = [int(i) for i in selection]
        if not indices:
            raise ValueError("a VecRef needs at least one component")
        size = len(target)
        for i in indices:
            if not -size <= i < size:
                raise IndexError(f"component {i} out of range for dim {size}")
        self._target = target
        self._indices = indices

    def __len__(self) -> int:
        return len(self._indices)

    def __getitem__(self, key):
        if isinstance(key, Vec):
            return self.swizzle(key)
        if isinstance(key, int):
            return self._target[self._indices[key]]
        raise TypeError(f"invalid index type {type(key).__name__}")

    def __setitem__(self, key: int, value: Any) -> None:
        if not isinstance(key, int):
            raise TypeError(f"invalid index type {type(key).__name__}")
        self._target[self._indices[key]] = value

    def assign(self, value: Any) -> "VecRef":
        """Write ``value`` (a scalar or a same-sized vector) through the view."""
        if isinstance(value, Vec):
            self._check_dim(value)
            values: Sequence[Any] = list(value)
        else:
            values = [value] * len(self)
        for i, v in enumerate(values):
            self[i] = v
        return self

    def to_vec(self) -> Vec:
        """Return an independent copy of the referenced components."""
        return Vec(*self)

    def __repr__(self) -> str:
        return f"VecRef({', '.join(repr(v) for v in self)})"