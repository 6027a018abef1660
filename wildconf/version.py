"""Package version detection.

Provides a single public function, ``get_version()``, which reads the version
of the installed ``wildconf`` distribution and caches it.
"""

from __future__ import annotations

from importlib import metadata
from typing import Optional

_CACHED_VERSION: Optional[str] = None


def get_version() -> str:
    """Return the package version string (e.g., ``1.2.3``).

    Installed package: the distribution metadata version.
    Source checkout without metadata: ``"dev"``.
    """
    global _CACHED_VERSION
    if _CACHED_VERSION:
        return _CACHED_VERSION

    try:
        _CACHED_VERSION = metadata.version("wildconf")
    except metadata.PackageNotFoundError:
        _CACHED_VERSION = "dev"
    return _CACHED_VERSION
