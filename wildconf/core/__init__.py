from __future__ import annotations

"""Parsing and lookup engine.

Nothing in here configures logging or reads library defaults except
:func:`load`, which consults :class:`wildconf.config.ConfigManager` for the
encoding and strictness it should use when the caller does not say.
"""

from .api import get, get_list, release, value_in_list  # noqa: F401
from .exceptions import (  # noqa: F401
    ConfigLoadError,
    ConfigOpenError,
    MalformedLineError,
    StoreReleasedError,
    WildconfError,
)
from .loader import load, loads, parse_lines  # noqa: F401
from .models import Entry  # noqa: F401
from .store import ConfigStore  # noqa: F401

__all__: list[str] = [
    "ConfigStore",
    "Entry",
    "load",
    "loads",
    "parse_lines",
    "get",
    "get_list",
    "value_in_list",
    "release",
    "WildconfError",
    "ConfigOpenError",
    "ConfigLoadError",
    "MalformedLineError",
    "StoreReleasedError",
]
