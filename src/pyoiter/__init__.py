import logging

from . import traits
from ._core import Config, get_config
from ._eager import Seq
from ._iter import (
    Every,
    Iter,
    Map,
    NotRestartableError,
    PyoIterator,
    Repeat,
    Skip,
    Times,
    Zip,
)
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._size import SizeHint, size_hint

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "Every",
    "Iter",
    "Map",
    "NoneOption",
    "NotRestartableError",
    "Option",
    "OptionUnwrapError",
    "PyoIterator",
    "Repeat",
    "Seq",
    "SizeHint",
    "Skip",
    "Some",
    "Times",
    "Zip",
    "get_config",
    "size_hint",
    "traits",
]
