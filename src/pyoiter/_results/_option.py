from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Either `Some(value)` or `NONE`.

    Returned by `PyoIterator.next()` (an element or the end of the iterator), and used as the upper bound of a `SizeHint` (a definite or an indefinite bound).
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some(2).is_some()
        True
        >>> po.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some(2).is_none()
        False
        >>> po.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some("car").unwrap()
        'car'
        >>> po.NONE.unwrap()
        Traceback (most recent call last):
            ...
        pyoiter._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with **msg** if the option is `NONE`.

        Args:
            msg (str): The message to include in the exception.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some("value").expect("fruits are healthy")
        'value'
        >>> po.NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        pyoiter._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or **default**.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some("car").unwrap_or("bike")
        'car'
        >>> po.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, func: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **func** to a contained `Some` value.

        `NONE` is left untouched.

        Args:
            func (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: The mapped option.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some("Hello, World!").map(len)
        Some(13)
        >>> po.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(func(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Use the `NONE` singleton rather than instantiating this class.
    """

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
