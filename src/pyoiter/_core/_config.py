from __future__ import annotations

import itertools
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from typing import Any

from ._protocols import SupportsSizeHint


@dataclass(slots=True)
class Config:
    """Process-wide settings for pyoiter.

    Retrieve the shared instance with `get_config()` and mutate its attributes directly.

    Example:
    ```python
    >>> import pyoiter as po
    >>> cfg = po.get_config()
    >>> cfg.max_items = 3
    >>> po.Seq.from_(range(10))
    Seq(0, 1, 2, ...)
    >>> cfg.max_items = 20

    ```
    """

    max_items: int = 20
    """Maximum number of elements shown in the repr of eager collections."""

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Render **data** for use inside a wrapper repr.

        Collections are rendered as a comma separated list of their first `max_items` elements.

        Lazy iterators are never consumed: pyoiter iterators render their own repr, others their type name.

        Args:
            data (Iterable[Any]): The data to render.

        Returns:
            str: The rendered data.
        """
        if isinstance(data, Collection):
            shown = ", ".join(repr(x) for x in itertools.islice(data, self.max_items))
            if len(data) > self.max_items:
                return f"{shown}, ..."
            return shown
        if isinstance(data, SupportsSizeHint):
            return repr(data)
        return data.__class__.__name__


_CONFIG = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance."""
    return _CONFIG
