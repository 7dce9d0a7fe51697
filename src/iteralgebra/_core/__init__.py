from ._config import Config, get_config, set_config
from ._errors import (
    CursorExhaustedError,
    InvalidConfigurationError,
    IterAlgebraError,
    StaleGroupError,
)
from ._main import Pipeable

__all__ = [
    "Config",
    "CursorExhaustedError",
    "InvalidConfigurationError",
    "IterAlgebraError",
    "Pipeable",
    "StaleGroupError",
    "get_config",
    "set_config",
]
