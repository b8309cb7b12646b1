"""
CountVector - an interval as a letterwise count of steps.

A count vector is an element of the free abelian group on the step letters.
The k-step interval starting on a degree of a scale is the count vector of
the k letters that follow it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from functools import total_ordering
from typing import ClassVar


@total_ordering
class CountVector:
    """
    Sparse mapping from letter to signed integer.

    Zero components are never stored, so equal vectors always have equal
    items. Ordering is lexicographic over the sorted (letter, count) pairs.

    Immutable and hashable.
    """

    __slots__ = ("_items",)
    _items: tuple[tuple[int, int], ...]

    ZERO: ClassVar[CountVector]

    def __init__(self, components: Mapping[int, int] | None = None) -> None:
        """Create a count vector, dropping zero components."""
        items = tuple(sorted((k, v) for k, v in (components or {}).items() if v != 0))
        object.__setattr__(self, "_items", items)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("CountVector is immutable")

    @classmethod
    def zero(cls) -> CountVector:
        """The additive identity."""
        return cls()

    @classmethod
    def from_slice(cls, letters: Iterable[int]) -> CountVector:
        """Count the letters of a word."""
        return cls(Counter(letters))

    @classmethod
    def from_triple(cls, counts: Iterable[int]) -> CountVector:
        """Build from dense counts, one per letter starting at 0."""
        return cls(dict(enumerate(counts)))

    def get(self, key: int) -> int:
        """Component for a letter, 0 when absent."""
        for k, v in self._items:
            if k == key:
                return v
        return 0

    def keys(self) -> list[int]:
        """Letters with non-zero components."""
        return [k for k, _ in self._items]

    def items(self) -> tuple[tuple[int, int], ...]:
        """Sorted (letter, count) pairs."""
        return self._items

    def to_triple(self, arity: int = 3) -> list[int]:
        """Dense counts for letters 0..arity-1."""
        return [self.get(i) for i in range(arity)]

    @property
    def taxicab_length(self) -> int:
        """Sum of absolute components."""
        return sum(abs(v) for _, v in self._items)

    def is_zero(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return self.taxicab_length

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __add__(self, other: CountVector) -> CountVector:
        if not isinstance(other, CountVector):
            return NotImplemented
        total: Counter[int] = Counter(dict(self._items))
        for k, v in other._items:
            total[k] += v
        return CountVector(total)

    def __sub__(self, other: CountVector) -> CountVector:
        if not isinstance(other, CountVector):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> CountVector:
        return CountVector({k: -v for k, v in self._items})

    def __mul__(self, n: int) -> CountVector:
        """Scalar multiplication."""
        if not isinstance(n, int):
            return NotImplemented
        return CountVector({k: v * n for k, v in self._items})

    def __rmul__(self, n: int) -> CountVector:
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountVector):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: CountVector) -> bool:
        if not isinstance(other, CountVector):
            return NotImplemented
        return self._items < other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __str__(self) -> str:
        inner = ", ".join(f"{k}: {v}" for k, v in self._items)
        return "{" + inner + "}"

    def __repr__(self) -> str:
        return f"CountVector({dict(self._items)})"


CountVector.ZERO = CountVector()
