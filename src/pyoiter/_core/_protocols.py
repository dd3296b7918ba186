from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from .._size import SizeHint


@runtime_checkable
class SupportsSizeHint(Protocol):
    """An object able to report bounds on the number of elements it will still yield."""

    def size_hint(self) -> SizeHint: ...


@runtime_checkable
class Restartable[T](Iterator[T], Protocol):
    """An iterator able to produce an independent copy of itself.

    The copy starts at the same position and advances without disturbing the original.
    """

    def clone(self) -> Self: ...
