"""Composition adapters.

Unlike the builtin `map`, `zip` and `itertools.islice`, they forward the `size_hint` of their sources, and can be cloned when their sources can.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import more_itertools as mit

from .._core import get_config
from .._size import SizeHint, size_hint
from ._base import PyoIterator, check_factor, clone_iter


class Map[T, R](PyoIterator[R]):
    """Apply **func** to each element of **source**.

    Args:
        source (Iterable[T]): The iterable to take elements from.
        func (Callable[[T], R]): The function to apply.
    """

    __slots__ = ("_func", "_source")

    def __init__(self, source: Iterable[T], func: Callable[[T], R]) -> None:
        self._source = iter(source)
        self._func = func

    def __repr__(self) -> str:
        return f"Map({get_config().iter_repr(self._source)}, {self._func!r})"

    def __next__(self) -> R:
        return self._func(next(self._source))

    def size_hint(self) -> SizeHint:
        return size_hint(self._source)

    def clone(self) -> Map[T, R]:
        return Map(clone_iter(self._source), self._func)


class Zip[T, U](PyoIterator[tuple[T, U]]):
    """Yield pairs of elements from **left** and **right**, until one of them is exhausted.

    **left** is always pulled first, so **right** is not advanced once **left** ends.

    Args:
        left (Iterable[T]): The iterable providing the first element of each pair.
        right (Iterable[U]): The iterable providing the second element of each pair.
    """

    __slots__ = ("_done", "_left", "_right")

    def __init__(self, left: Iterable[T], right: Iterable[U]) -> None:
        self._left = iter(left)
        self._right = iter(right)
        self._done = False

    def __repr__(self) -> str:
        cfg = get_config()
        return f"Zip({cfg.iter_repr(self._left)}, {cfg.iter_repr(self._right)})"

    def __next__(self) -> tuple[T, U]:
        if self._done:
            raise StopIteration
        try:
            return (next(self._left), next(self._right))
        except StopIteration:
            self._done = True
            raise

    def size_hint(self) -> SizeHint:
        if self._done:
            return SizeHint.exact(0)
        return size_hint(self._left).min(size_hint(self._right))

    def clone(self) -> Zip[T, U]:
        other = Zip(clone_iter(self._left), clone_iter(self._right))
        other._done = self._done
        return other


class Skip[T](PyoIterator[T]):
    """Skip the first **n** elements of **source**, then yield the rest.

    The elements are only skipped on the first pull.

    Args:
        source (Iterable[T]): The iterable to take elements from.
        n (int): The number of elements to skip. Must be at least 0.

    Raises:
        TypeError: If **n** is not an `int`.
        ValueError: If **n** is negative.
    """

    __slots__ = ("_n", "_source")

    def __init__(self, source: Iterable[T], n: int) -> None:
        self._source = iter(source)
        self._n = check_factor(n, "skip", minimum=0)

    def __repr__(self) -> str:
        return f"Skip({get_config().iter_repr(self._source)}, n={self._n})"

    def __next__(self) -> T:
        if self._n > 0:
            mit.consume(self._source, self._n)
            self._n = 0
        return next(self._source)

    def size_hint(self) -> SizeHint:
        return size_hint(self._source).saturating_sub(self._n)

    def clone(self) -> Skip[T]:
        return Skip(clone_iter(self._source), self._n)
