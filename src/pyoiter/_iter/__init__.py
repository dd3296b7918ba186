from ._base import NotRestartableError, PyoIterator, clone_iter
from ._compose import Map, Skip, Zip
from ._every import Every
from ._main import Iter, convert_data
from ._repeat import Repeat
from ._times import Times

__all__ = [
    "Every",
    "Iter",
    "Map",
    "NotRestartableError",
    "PyoIterator",
    "Repeat",
    "Skip",
    "Times",
    "Zip",
    "clone_iter",
    "convert_data",
]
