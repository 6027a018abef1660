from __future__ import annotations

"""Loading configuration files into :class:`ConfigStore` objects.

:func:`load` is the main entry point. It expands the path, opens the file,
parses it line by line and returns a fully built store. Either the whole file
is parsed or an exception is raised; no partially filled store escapes.
"""

import codecs
import logging
import os
from typing import Iterable, Optional

from ..config import ConfigManager
from .exceptions import ConfigLoadError, ConfigOpenError
from .parser import expand_path, iter_entries
from .store import ConfigStore

__all__ = ["load", "loads", "parse_lines"]

logger = logging.getLogger(__name__)


def _loader_defaults() -> dict:
    return ConfigManager().get_loader_settings()


def parse_lines(lines: Iterable[str], *, strict: bool = False,
                source: Optional[str] = None) -> ConfigStore:
    """Build a store from an iterable of raw lines.

    Args:
        lines: Lines in file order, with or without trailing newlines
        strict: Raise :class:`MalformedLineError` for lines without ``=``
        source: Label used in log messages and errors

    Returns:
        A populated (possibly empty) :class:`ConfigStore`
    """
    return ConfigStore(iter_entries(lines, strict=strict, source=source), source=source)


def loads(text: str, *, strict: bool = False) -> ConfigStore:
    """Build a store from configuration *text*."""
    return parse_lines(text.split("\n"), strict=strict)


def load(path: str, *, strict: Optional[bool] = None,
         encoding: Optional[str] = None) -> ConfigStore:
    """Load the configuration file at *path*.

    The path goes through :func:`expand_path` first, so ``~/app.conf``,
    ``$CONFIG_DIR/app.conf`` and single-match globs all work.

    Args:
        path: Path of the file to load
        strict: Reject lines without ``=`` instead of skipping them; ``None``
            uses the library default
        encoding: Text encoding; ``None`` uses the library default

    Raises:
        ConfigOpenError: the file could not be opened
        ConfigLoadError: the encoding is unknown, or the file could not be read
            or decoded
        MalformedLineError: *strict* is on and a line has no ``=``
    """
    if strict is None or encoding is None:
        defaults = _loader_defaults()
        if strict is None:
            strict = bool(defaults.get("strict", False))
        if encoding is None:
            encoding = defaults.get("encoding") or "utf-8"

    target = expand_path(os.fspath(path))
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigLoadError(f"unknown encoding {encoding!r}", target, exc) from exc

    try:
        fh = open(target, "r", encoding=encoding, newline="\n")
    except OSError as exc:
        logger.info("Could not open config file %s: %s", target, exc)
        raise ConfigOpenError(target, exc) from exc

    with fh:
        try:
            store = parse_lines(fh, strict=bool(strict), source=target)
        except UnicodeDecodeError as exc:
            raise ConfigLoadError(f"cannot decode config file as {encoding}: {exc}",
                                  target, exc) from exc
        except OSError as exc:
            raise ConfigLoadError(f"error reading config file: {exc}", target, exc) from exc

    logger.info("Loaded %d entries from %s", len(store), target)
    return store
