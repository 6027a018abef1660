"""Flat ``key = value`` configuration files with wildcard lookups.

Typical use::

    from wildconf import load

    with load("~/.myapp.conf") as store:
        port = store.get("server.port")
        hosts = store.get_list("mirror.*")
        allowed = store.value_in_list("upload.allow", "report.pdf")

Front-ends should only depend on the names re-exported here.
"""

from .core import (  # re-export for convenience
    ConfigLoadError,
    ConfigOpenError,
    ConfigStore,
    Entry,
    MalformedLineError,
    StoreReleasedError,
    WildconfError,
    get,
    get_list,
    load,
    loads,
    parse_lines,
    release,
    value_in_list,
)
from .version import get_version

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
    "get_version",
    "WildconfError",
    "ConfigOpenError",
    "ConfigLoadError",
    "MalformedLineError",
    "StoreReleasedError",
]
