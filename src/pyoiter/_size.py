from __future__ import annotations

import operator
from collections.abc import Iterable, Sized
from typing import Any, NamedTuple

from ._core import SupportsSizeHint
from ._results import NONE, Option, Some

SEQUENCE_ITERATORS: frozenset[type[Any]] = frozenset(
    {
        type(iter([])),
        type(iter(())),
        type(iter(range(0))),
        type(iter(range(1 << 64))),
        type(iter("")),
        type(iter("Ā")),
        type(iter(b"")),
        type(iter(bytearray())),
        type(reversed([])),
    }
)
"""Builtin iterators over sequences.

Their `__length_hint__` is exact, and they support `copy.copy()` to produce an independent iterator at the same position.
"""


class SizeHint(NamedTuple):
    """Bounds on the number of elements an iterator will still yield.

    `upper` is `NONE` when no upper bound is known (the iterator may be infinite).

    The bounds are said to be exact when `upper == Some(lower)`.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.SizeHint.exact(3)
    SizeHint(lower=3, upper=Some(3))
    >>> po.SizeHint.exact(3).scaled(2).plus(po.SizeHint.exact(1))
    SizeHint(lower=7, upper=Some(7))
    >>> po.SizeHint(2, po.NONE).is_exact()
    False

    ```
    """

    lower: int
    upper: Option[int]

    @staticmethod
    def exact(n: int) -> SizeHint:
        """Bounds of an iterator yielding exactly **n** elements."""
        return SizeHint(n, Some(n))

    @staticmethod
    def unknown() -> SizeHint:
        """Bounds of an iterator about which nothing is known."""
        return SizeHint(0, NONE)

    def is_exact(self) -> bool:
        return self.upper.map(lambda u: u == self.lower).unwrap_or(False)

    def exact_len(self) -> Option[int]:
        """Return `Some(lower)` if the bounds are exact, `NONE` otherwise.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.SizeHint.exact(4).exact_len()
        Some(4)
        >>> po.SizeHint(4, po.Some(6)).exact_len()
        NONE

        ```
        """
        return Some(self.lower) if self.is_exact() else NONE

    def scaled(self, factor: int) -> SizeHint:
        """Multiply both bounds by **factor**."""
        return SizeHint(self.lower * factor, self.upper.map(lambda u: u * factor))

    def ceil_div(self, divisor: int) -> SizeHint:
        """Divide both bounds by **divisor**, rounding up.

        This is the number of elements left when keeping one element out of every **divisor**, starting with the first one.
        """
        return SizeHint(
            -(-self.lower // divisor), self.upper.map(lambda u: -(-u // divisor))
        )

    def plus(self, other: SizeHint) -> SizeHint:
        """Add two bounds together.

        The upper bound is only known if both upper bounds are known.
        """
        if self.upper.is_some() and other.upper.is_some():
            upper: Option[int] = Some(self.upper.unwrap() + other.upper.unwrap())
        else:
            upper = NONE
        return SizeHint(self.lower + other.lower, upper)

    def saturating_sub(self, n: int) -> SizeHint:
        """Subtract **n** from both bounds, without going below zero."""
        return SizeHint(max(self.lower - n, 0), self.upper.map(lambda u: max(u - n, 0)))

    def min(self, other: SizeHint) -> SizeHint:
        """Bounds of the shortest of two iterators.

        A known upper bound always wins over an unknown one.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.SizeHint.exact(3).min(po.SizeHint(5, po.NONE))
        SizeHint(lower=3, upper=Some(3))
        >>> po.SizeHint(2, po.NONE).min(po.SizeHint(5, po.NONE))
        SizeHint(lower=2, upper=NONE)

        ```
        """
        lower = min(self.lower, other.lower)
        match (self.upper.is_some(), other.upper.is_some()):
            case (True, True):
                return SizeHint(
                    lower, Some(min(self.upper.unwrap(), other.upper.unwrap()))
                )
            case (True, False):
                return SizeHint(lower, self.upper)
            case (False, True):
                return SizeHint(lower, other.upper)
            case _:
                return SizeHint(lower, NONE)


def size_hint(data: Iterable[Any]) -> SizeHint:
    """Get the `SizeHint` of any iterable, without consuming it.

    - Objects implementing `size_hint()`, such as all pyoiter iterators, report their own bounds.
    - `Sized` collections and builtin sequence iterators are exact.
    - Anything else, such as generators, is unknown.

    Args:
        data (Iterable[Any]): The iterable to inspect.

    Returns:
        SizeHint: The bounds on the number of elements **data** will yield.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.size_hint([1, 2, 3])
    SizeHint(lower=3, upper=Some(3))
    >>> it = iter(range(5))
    >>> _ = next(it)
    >>> po.size_hint(it)
    SizeHint(lower=4, upper=Some(4))
    >>> po.size_hint(x for x in range(5))
    SizeHint(lower=0, upper=NONE)

    ```
    """
    if isinstance(data, SupportsSizeHint):
        return data.size_hint()
    if isinstance(data, Sized):
        return SizeHint.exact(len(data))
    if type(data) in SEQUENCE_ITERATORS:
        return SizeHint.exact(operator.length_hint(data))
    return SizeHint.unknown()
