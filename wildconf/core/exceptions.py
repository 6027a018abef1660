from __future__ import annotations

"""Exception classes raised by wildconf.

All library errors inherit from :class:`WildconfError` so callers can catch
one type. Lookup misses are never reported through exceptions; they come back
as ``None``, an empty list or ``False``.
"""

from typing import Optional

__all__ = [
    "WildconfError",
    "ConfigOpenError",
    "ConfigLoadError",
    "MalformedLineError",
    "StoreReleasedError",
]


class WildconfError(Exception):
    """Base exception for all wildconf errors.

    Carries the configuration file path (when one is involved) and the
    underlying exception that triggered the failure.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.path:
            return f"[{self.path}] {super().__str__()}"
        return super().__str__()


class ConfigOpenError(WildconfError):
    """Raised when the configuration file cannot be opened.

    Missing files, permission problems and directories given as paths all end
    up here. The original :class:`OSError` is kept in ``cause`` and its
    ``errno``/``strerror`` are copied for convenience.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.errno = cause.errno
        self.strerror = cause.strerror
        message = f"cannot open config file: {cause.strerror or cause}"
        super().__init__(message, path, cause)


class ConfigLoadError(WildconfError):
    """Raised when an opened configuration file cannot be read or decoded."""
    pass


class MalformedLineError(ConfigLoadError):
    """Raised in strict mode for a line that has no ``=`` separator."""

    def __init__(self, line_number: int, line: str,
                 path: Optional[str] = None) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: missing '=' in {line!r}", path)


class StoreReleasedError(WildconfError):
    """Raised when a lookup is attempted on a store that has been released."""
    pass
