from __future__ import annotations

"""Home-directory and path expansion helpers.

Two different expansions happen during a load:

- :func:`expand_path` rewrites the *path argument* (``~``, ``$VAR`` and glob
  patterns) before the file is opened
- :func:`expand_home` rewrites a *value* read from the file when it starts
  with ``~`` or ``~/``
"""

import glob
import logging
import os
from typing import Mapping, Optional

from ..matching import has_magic

__all__ = ["expand_home", "expand_path"]

logger = logging.getLogger(__name__)


def expand_home(value: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Replace a leading ``~`` in *value* with ``$HOME``.

    Only ``~`` on its own and ``~/...`` are expanded; ``~user`` forms are
    returned unchanged, and so is everything when ``HOME`` is not set.

    Args:
        value: Trimmed configuration value
        environ: Environment mapping to read ``HOME`` from (defaults to
            :data:`os.environ` at call time)

    Examples:
        >>> expand_home("~/data", {"HOME": "/home/u"})
        '/home/u/data'
        >>> expand_home("~otheruser/data", {"HOME": "/home/u"})
        '~otheruser/data'
    """
    if not value.startswith("~"):
        return value
    if len(value) > 1 and value[1] != "/":
        return value

    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if home is None:
        return value
    return home + value[1:]


def expand_path(path: str) -> str:
    """Return the path to open for *path*.

    Applies ``~``/``~user`` expansion, then ``$VAR``/``${VAR}`` expansion, then
    globbing. A glob that matches nothing leaves the expanded path as it is;
    one that matches more than one file, or any error along the way, makes the
    literal *path* win.
    """
    try:
        expanded = os.path.expandvars(os.path.expanduser(path))
        if not has_magic(expanded):
            return expanded
        candidates = glob.glob(expanded)
    except (OSError, ValueError) as exc:
        logger.debug("Path expansion failed for %s: %s", path, exc)
        return path

    if not candidates:
        return expanded
    if len(candidates) > 1:
        logger.debug("Path %s expanded to %d candidates; using it literally",
                     path, len(candidates))
        return path
    return candidates[0]
