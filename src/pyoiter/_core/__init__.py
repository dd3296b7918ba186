from ._config import Config, get_config
from ._main import CommonBase, Pipeable
from ._protocols import Restartable, SupportsSizeHint

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "Restartable",
    "SupportsSizeHint",
    "get_config",
]
