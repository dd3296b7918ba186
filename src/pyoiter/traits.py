"""Public traits for custom iterator implementations.

`Pipeable` only depends on `Self` for its arguments, return types and internal logic, so it can be safely added to any already existing class.

`PyoIterator` is equivalent to subclassing `collections.abc.Iterator`, but gives access to all the pyoiter adapters.

`SupportsSizeHint` and `Restartable` are the structural capabilities pyoiter looks for on a source:

- `SupportsSizeHint` to propagate bounds on the remaining length
- `Restartable` to replay the source with `times()`

Example:
```python
>>> from pyoiter import traits
>>> import pyoiter as po
>>> isinstance(po.Iter([1]), traits.Restartable)
True
>>> isinstance(iter([1]), traits.SupportsSizeHint)
False

```
"""

from ._core import Pipeable, Restartable, SupportsSizeHint
from ._iter import PyoIterator

__all__ = ["Pipeable", "PyoIterator", "Restartable", "SupportsSizeHint"]
