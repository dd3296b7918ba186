from __future__ import annotations

import copy
from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Self

import cytoolz as cz

from .._core import Pipeable, Restartable
from .._results import NONE, Option, OptionUnwrapError, Some
from .._size import SEQUENCE_ITERATORS, SizeHint

if TYPE_CHECKING:
    from .._eager import Seq
    from ._compose import Map, Skip, Zip
    from ._every import Every
    from ._repeat import Repeat
    from ._times import Times


class NotRestartableError(TypeError): ...


def check_factor(n: int, adapter: str, minimum: int = 1) -> int:
    """Validate the integer argument given to an adapter constructor.

    Args:
        n (int): The value to validate.
        adapter (str): Name of the adapter, used in error messages.
        minimum (int): Smallest accepted value. Defaults to 1.

    Returns:
        int: **n**, unchanged.

    Raises:
        TypeError: If **n** is not an `int`.
        ValueError: If **n** is lower than **minimum**.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        msg = f"{adapter}() expects an int, got {n.__class__.__name__}"
        raise TypeError(msg)
    if n < minimum:
        msg = f"{adapter}() expects n >= {minimum}, got {n}"
        raise ValueError(msg)
    return n


def clone_iter[T](data: Iterator[T]) -> Iterator[T]:
    """Produce an independent iterator starting at the same position as **data**.

    **data** itself is left untouched.

    Supported iterators are `Restartable` ones (anything with a `clone()` method, such as all pyoiter iterators), and builtin iterators over sequences (`list`, `tuple`, `range`, `str`, `bytes`, `bytearray`).

    Args:
        data (Iterator[T]): The iterator to duplicate.

    Returns:
        Iterator[T]: The independent copy.

    Raises:
        NotRestartableError: If **data** is a single-use iterator, such as a generator.
    """
    if isinstance(data, Restartable):
        return data.clone()
    if type(data) in SEQUENCE_ITERATORS:
        return copy.copy(data)
    msg = (
        f"{data.__class__.__name__} is a single-use iterator and cannot be restarted. "
        "Collect it into a Seq first."
    )
    raise NotRestartableError(msg)


class PyoIterator[T](Pipeable, Iterator[T]):
    """Base trait shared by every pyoiter iterator.

    Implements the `Iterator` Protocol from `collections.abc`, so any instance can be used as a standard iterator.

    ## Required

    - `__next__`, raising `StopIteration` once the iterator is exhausted.

    ## Optional

    - `size_hint`, to report bounds on the remaining length. Defaults to unknown bounds.
    - `clone`, to allow restarting the iterator (required by `times`). Defaults to raising `NotRestartableError`.

    ## Features

    - fluent adapters: `every`, `repeat`, `times`, `map`, `zip`, `skip`
    - length reporting: `size_hint`, `len`, `__length_hint__`
    - consumers: `next`, `count`, `collect`
    - all methods from the `Pipeable` mixin

    Example:
    ```python
    >>> import pyoiter as po
    >>> class Countdown(po.PyoIterator[int]):
    ...     __slots__ = ("_n",)
    ...     def __init__(self, n: int) -> None:
    ...         self._n = n
    ...     def __next__(self) -> int:
    ...         if self._n == 0:
    ...             raise StopIteration
    ...         self._n -= 1
    ...         return self._n + 1
    ...     def size_hint(self) -> po.SizeHint:
    ...         return po.SizeHint.exact(self._n)
    >>> Countdown(6).every(2).size_hint()
    SizeHint(lower=3, upper=Some(3))
    >>> Countdown(6).every(2).into(list)
    [6, 4, 2]

    ```
    """

    __slots__ = ()

    @abstractmethod
    def __next__(self) -> T: ...

    def __length_hint__(self) -> int:
        return self.size_hint().lower

    def size_hint(self) -> SizeHint:
        """Return the bounds on the remaining length of the iterator.

        The lower bound is the minimum number of elements still to be yielded.

        The upper bound is `Some(n)` if at most n elements will be yielded, `NONE` if that is unknown.

        Returns:
            SizeHint: The bounds.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).size_hint()
        SizeHint(lower=3, upper=Some(3))
        >>> po.Iter(x for x in range(3)).size_hint()
        SizeHint(lower=0, upper=NONE)

        ```
        """
        return SizeHint.unknown()

    def len(self) -> int:
        """Return the exact remaining length of the iterator, without consuming it.

        Returns:
            int: The number of elements still to be yielded.

        Raises:
            OptionUnwrapError: If the iterator does not report an exact `size_hint`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter(range(10)).every(3)
        >>> it.len()
        4
        >>> it.next()
        Some(0)
        >>> it.len()
        3

        ```
        """
        exact = self.size_hint().exact_len()
        if exact.is_none():
            msg = f"{self!r} does not report an exact length"
            raise OptionUnwrapError(msg)
        return exact.unwrap()

    def clone(self) -> Self:
        """Return an independent copy of the iterator, at its current position.

        Advancing the copy does not advance the original, and vice versa.

        Returns:
            Self: The copy.

        Raises:
            NotRestartableError: If the iterator, or one of its sources, is single-use.
        """
        msg = f"{self.__class__.__name__} does not support clone()"
        raise NotRestartableError(msg)

    def next(self) -> Option[T]:
        """Advance the iterator and return the next element.

        Returns:
            Option[T]: `Some(element)`, or `NONE` once the iterator is exhausted.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter([1, 2])
        >>> it.next()
        Some(1)
        >>> it.next()
        Some(2)
        >>> it.next()
        NONE

        ```
        """
        try:
            return Some(next(self))
        except StopIteration:
            return NONE

    def count(self) -> int:
        """Consume the iterator, counting the number of elements.

        Returns:
            int: The number of elements yielded.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(x for x in range(5)).repeat(3).count()
        15

        ```
        """
        return cz.itertoolz.count(self)

    def collect(self) -> Seq[T]:
        """Consume the iterator into a `Seq`.

        Returns:
            Seq[T]: The collected elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2]).times(2).collect()
        Seq(1, 2, 1, 2)

        ```
        """
        from .._eager import Seq

        return Seq(tuple(self))

    def every(self, n: int) -> Every[T]:
        """Yield every **n**-th element, starting with the first one.

        See `Every` for details.

        Args:
            n (int): The step between two yielded elements. Must be at least 1.

        Returns:
            Every[T]: The adapted iterator.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(range(1, 9)).every(3).into(list)
        [1, 4, 7]

        ```
        """
        from ._every import Every

        return Every(self, n)

    def repeat(self, n: int) -> Repeat[T]:
        """Yield each element **n** times in a row.

        See `Repeat` for details.

        Args:
            n (int): The number of times each element is yielded. Must be at least 1.

        Returns:
            Repeat[T]: The adapted iterator.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2]).repeat(2).into(list)
        [1, 1, 2, 2]

        ```
        """
        from ._repeat import Repeat

        return Repeat(self, n)

    def times(self, n: int) -> Times[T]:
        """Yield the whole iterator **n** times, end to end.

        See `Times` for details, notably the restartability requirement.

        Args:
            n (int): The number of passes over the iterator. Must be at least 1.

        Returns:
            Times[T]: The adapted iterator.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2]).times(3).into(list)
        [1, 2, 1, 2, 1, 2]

        ```
        """
        from ._times import Times

        return Times(self, n)

    def map[R](self, func: Callable[[T], R]) -> Map[T, R]:
        """Apply **func** to each element.

        The length of the iterator is unchanged.

        Args:
            func (Callable[[T], R]): The function to apply.

        Returns:
            Map[T, R]: The mapped iterator.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter(range(1, 10)).every(3).map(lambda x: x * 2)
        >>> it.len()
        3
        >>> it.into(list)
        [2, 8, 14]

        ```
        """
        from ._compose import Map

        return Map(self, func)

    def zip[U](self, other: Iterable[U]) -> Zip[T, U]:
        """Yield pairs of elements from `self` and **other**, until one of them is exhausted.

        Args:
            other (Iterable[U]): The iterable to pair elements with.

        Returns:
            Zip[T, U]: An iterator of pairs.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter([1, 2]).repeat(2).zip(po.Iter([2, 3]).repeat(2))
        >>> it.size_hint()
        SizeHint(lower=4, upper=Some(4))
        >>> it.into(list)
        [(1, 2), (1, 2), (2, 3), (2, 3)]

        ```
        """
        from ._compose import Zip

        return Zip(self, other)

    def skip(self, n: int) -> Skip[T]:
        """Skip the first **n** elements.

        The elements are only skipped on the first pull.

        Args:
            n (int): The number of elements to skip. Must be at least 0.

        Returns:
            Skip[T]: The adapted iterator.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter([1, 2]).times(2).skip(3)
        >>> it.size_hint()
        SizeHint(lower=1, upper=Some(1))
        >>> it.into(list)
        [2]

        ```
        """
        from ._compose import Skip

        return Skip(self, n)
