from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload

from ._core import CommonBase, get_config
from ._iter import Iter, convert_data


class Seq[T](CommonBase[tuple[T, ...]], Sequence[T]):
    """`Seq` represent an in memory, immutable **ordered** collection of elements.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable collection.

    A `Seq` can be iterated over as many times as needed, which makes it a restartable source for `Times`.

    The underlying data structure is a `tuple`.

    You can create a `Seq` from any `Iterable` or unpacked values using the `from_` class method, or by collecting an iterator with `.collect()`.

    If you already have a `tuple`, simply pass it to the constructor, without runtime checks.

    Args:
        data (tuple[T, ...]): The data to initialize the Seq with.

    Example:
    ```python
    >>> import pyoiter as po
    >>> seq = po.Iter(x * 10 for x in range(3)).collect()
    >>> seq
    Seq(0, 10, 20)
    >>> po.Times(seq, 2).into(list)
    [0, 10, 20, 0, 10, 20]

    ```
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Seq({get_config().iter_repr(self._inner)})"

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice[Any, Any, Any]) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> po.Seq.from_([1, 2])
        Seq(1, 2)

        ```
        """
        converted = convert_data(data, *more_data)
        return Seq(converted if isinstance(converted, tuple) else tuple(converted))

    def iter(self) -> Iter[T]:
        """Get an `Iter` over the `Seq`.

        Call this to switch to lazy evaluation.

        Returns:
            Iter[T]: An exact-sized, restartable iterator over the elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Seq((1, 2, 3)).iter().every(2).into(list)
        [1, 3]

        ```
        """
        return Iter(self._inner)
