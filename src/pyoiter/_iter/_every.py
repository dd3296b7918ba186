from __future__ import annotations

from collections.abc import Iterable

import more_itertools as mit

from .._core import get_config
from .._size import SizeHint, size_hint
from ._base import PyoIterator, check_factor, clone_iter


class Every[T](PyoIterator[T]):
    """Yield every **n**-th element of **source**, starting with the first one.

    Each pull takes one element from **source**, then discards the next n - 1 elements.

    If **source** runs out while discarding, the pulled element is still yielded.

    The `size_hint` is the one of **source** divided by **n**, rounded up, so it is exact whenever the one of **source** is.

    With `n = 1`, every element is yielded.

    Args:
        source (Iterable[T]): The iterable to take elements from.
        n (int): The step between two yielded elements. Must be at least 1.

    Raises:
        TypeError: If **n** is not an `int`.
        ValueError: If **n** is lower than 1.

    Example:
    ```python
    >>> import pyoiter as po
    >>> it = po.Every(range(1, 9), 3)
    >>> it.len()
    3
    >>> it.into(list)
    [1, 4, 7]
    >>> it.next()
    NONE

    ```
    """

    __slots__ = ("_done", "_n", "_source")

    def __init__(self, source: Iterable[T], n: int) -> None:
        self._source = iter(source)
        self._n = check_factor(n, "every")
        self._done = False

    def __repr__(self) -> str:
        return f"Every({get_config().iter_repr(self._source)}, n={self._n})"

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        try:
            value = next(self._source)
        except StopIteration:
            self._done = True
            raise
        mit.consume(self._source, self._n - 1)
        return value

    def size_hint(self) -> SizeHint:
        if self._done:
            return SizeHint.exact(0)
        return size_hint(self._source).ceil_div(self._n)

    def clone(self) -> Every[T]:
        other = Every(clone_iter(self._source), self._n)
        other._done = self._done
        return other
