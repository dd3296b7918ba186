from __future__ import annotations

from collections.abc import Iterable

from .._core import get_config
from .._results import NONE, Option, Some
from .._size import SizeHint, size_hint
from ._base import PyoIterator, check_factor, clone_iter


class Repeat[T](PyoIterator[T]):
    """Yield each element of **source** **n** times in a row, before advancing **source**.

    The last element drawn from **source** is kept, along with the number of times it must still be yielded.

    A fresh element is only drawn once that count reaches zero, so the iterator never ends while repeats of the current element remain.

    The same object is yielded **n** times, without copying it, like `itertools.repeat` does.

    The `size_hint` is the one of **source** multiplied by **n**, plus the repeats already drawn but not yet yielded.

    With `n = 1`, every element is yielded once.

    Args:
        source (Iterable[T]): The iterable to take elements from.
        n (int): The number of times each element is yielded. Must be at least 1.

    Raises:
        TypeError: If **n** is not an `int`.
        ValueError: If **n** is lower than 1.

    Example:
    ```python
    >>> import pyoiter as po
    >>> it = po.Repeat([1, 2], 2)
    >>> it.len()
    4
    >>> it.next()
    Some(1)
    >>> it.len()
    3
    >>> it.into(list)
    [1, 2, 2]

    ```
    """

    __slots__ = ("_count", "_current", "_done", "_n", "_source")

    def __init__(self, source: Iterable[T], n: int) -> None:
        self._source = iter(source)
        self._n = check_factor(n, "repeat")
        self._current: Option[T] = NONE
        self._count = 0
        self._done = False

    def __repr__(self) -> str:
        return f"Repeat({get_config().iter_repr(self._source)}, n={self._n})"

    def __next__(self) -> T:
        if self._count == 0:
            if self._done:
                raise StopIteration
            try:
                self._current = Some(next(self._source))
            except StopIteration:
                self._current = NONE
                self._done = True
                raise
            self._count = self._n
        self._count -= 1
        return self._current.unwrap()

    def size_hint(self) -> SizeHint:
        if self._done:
            return SizeHint.exact(0)
        return (
            size_hint(self._source).scaled(self._n).plus(SizeHint.exact(self._count))
        )

    def clone(self) -> Repeat[T]:
        other = Repeat(clone_iter(self._source), self._n)
        other._current = self._current
        other._count = self._count
        other._done = self._done
        return other
