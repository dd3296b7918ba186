from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .._core import get_config
from .._size import SizeHint, size_hint
from ._base import PyoIterator, check_factor, clone_iter

logger = logging.getLogger(__name__)


class Times[T](PyoIterator[T]):
    """Yield all the elements of **source**, **n** times in a row.

    Once the active pass over **source** is exhausted, a fresh pass is cloned from a template kept untouched since construction, until **n** passes have been yielded.

    Exhaustion is terminal: once the last pass ends, the iterator never yields again.

    **source** must be restartable when `n > 1`:

    - pyoiter iterators whose sources are themselves restartable
    - builtin sequence iterators, and re-iterable collections such as `list`, `tuple`, `range` or `Seq`
    - any iterator implementing `clone()` (see `Restartable`)

    Single-use iterators such as generators are rejected. Collect them into a `Seq` first.

    The `size_hint` is the length of one full pass multiplied by the remaining passes, plus what remains of the active pass.

    With `n = 1`, a single plain pass is made, and **source** does not need to be restartable.

    Args:
        source (Iterable[T]): The iterable to replay.
        n (int): The total number of passes. Must be at least 1.

    Raises:
        TypeError: If **n** is not an `int`.
        ValueError: If **n** is lower than 1.
        NotRestartableError: If `n > 1` and **source** cannot be restarted.

    Example:
    ```python
    >>> import pyoiter as po
    >>> it = po.Times([1, 2], 3)
    >>> it.len()
    6
    >>> it.into(list)
    [1, 2, 1, 2, 1, 2]
    >>> po.Times((x for x in range(3)), 2)
    Traceback (most recent call last):
        ...
    pyoiter._iter._base.NotRestartableError: generator is a single-use iterator and cannot be restarted. Collect it into a Seq first.

    ```
    """

    __slots__ = ("_active", "_done", "_n", "_remaining", "_template")

    _template: Iterator[T] | None

    def __init__(self, source: Iterable[T], n: int) -> None:
        self._n = check_factor(n, "times")
        self._active = iter(source)
        self._template = clone_iter(self._active) if n > 1 else None
        self._remaining = n - 1
        self._done = False

    def __repr__(self) -> str:
        return f"Times({get_config().iter_repr(self._active)}, n={self._n})"

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        try:
            return next(self._active)
        except StopIteration:
            if self._template is None or self._remaining == 0:
                self._done = True
                raise
        self._remaining -= 1
        logger.debug("%r: starting a new pass, %d left", self, self._remaining)
        self._active = clone_iter(self._template)
        try:
            return next(self._active)
        except StopIteration:
            # An empty pass means every remaining pass is empty too.
            self._done = True
            raise

    def size_hint(self) -> SizeHint:
        if self._done:
            return SizeHint.exact(0)
        active = size_hint(self._active)
        if self._template is None:
            return active
        return size_hint(self._template).scaled(self._remaining).plus(active)

    def clone(self) -> Times[T]:
        other = Times.__new__(Times)
        other._n = self._n
        other._active = clone_iter(self._active)
        other._template = (
            None if self._template is None else clone_iter(self._template)
        )
        other._remaining = self._remaining
        other._done = self._done
        return other
