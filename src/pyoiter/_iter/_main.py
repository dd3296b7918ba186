from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload

import cytoolz as cz

from .._core import CommonBase, get_config
from .._size import SizeHint, size_hint
from ._base import PyoIterator, clone_iter


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class Iter[T](CommonBase[Iterator[T]], PyoIterator[T]):
    """A wrapper around any Python `Iterable`, giving it the pyoiter adapters.

    - An `Iterable` is any object capable of returning its members one at a time, permitting it to be iterated over in a for-loop.
    - An `Iterator` is an object representing a stream of data; returned by calling `iter()` on an `Iterable`.

    The `size_hint` is derived from the wrapped iterator (see `size_hint()`): exact for builtin sequence iterators and pyoiter iterators over them, unknown for generators.

    `clone()`, and therefore `times()`, only works if the wrapped iterator can be restarted.

    Keep in mind that `Iter` instances are single-use; once exhausted, they cannot be reused or reset.

    If you need to reuse the data, consider collecting it into a `Seq` first with `.collect()`.

    Args:
        data (Iterable[T]): Any object that can be iterated over.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Iter(range(1, 6)).every(2).repeat(2).times(2).into(list)
    [1, 1, 3, 3, 5, 5, 1, 1, 3, 3, 5, 5]

    ```
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __repr__(self) -> str:
        return f"Iter({get_config().iter_repr(self._inner)})"

    def __next__(self) -> T:
        return next(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_(1, 2, 3).every(2).into(list)
        [1, 3]
        >>> po.Iter.from_([1, 2, 3]).len()
        3

        ```
        """
        return Iter(convert_data(data, *more_data))

    def size_hint(self) -> SizeHint:
        return size_hint(self._inner)

    def clone(self) -> Iter[T]:
        """Return an independent copy of the iterator, at its current position.

        Only restartable iterators can be cloned: pyoiter iterators over restartable sources, builtin sequence iterators, and any iterator implementing `clone()`.

        Returns:
            Iter[T]: The copy.

        Raises:
            NotRestartableError: If the wrapped iterator is single-use.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter([1, 2, 3])
        >>> it.next()
        Some(1)
        >>> it.clone().into(list)
        [2, 3]
        >>> it.into(list)
        [2, 3]

        ```
        """
        return Iter(clone_iter(self._inner))
