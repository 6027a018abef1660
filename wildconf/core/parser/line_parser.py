from __future__ import annotations

"""Line-level parsing of ``key = value`` configuration text.

Rules applied to every physical line:

1. strip the trailing newline and surrounding ASCII whitespace
2. skip blank lines and full-line comments (``#`` or ``;``)
3. split at the first ``=``; lines without one are malformed
4. trim key and value, cut the value at the first ``#`` or ``;``
5. expand a leading ``~`` in the value against ``HOME``

There is no quoting, no escaping and no line continuation.
"""

import logging
import os
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from ..exceptions import MalformedLineError
from ..models import Entry
from .expansion import expand_home

__all__ = ["WHITESPACE", "COMMENT_CHARS", "parse_line", "iter_entries"]

logger = logging.getLogger(__name__)

# ASCII whitespace as classified by C isspace() in the "C" locale.
WHITESPACE = " \t\n\r\v\f"
COMMENT_CHARS = "#;"


def _strip_inline_comment(value: str) -> str:
    for index, char in enumerate(value):
        if char in COMMENT_CHARS:
            return value[:index].rstrip(WHITESPACE)
    return value


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Split one raw line into a ``(key, value)`` pair.

    Returns ``None`` for blank and comment lines. Raises :class:`ValueError`
    when the line carries content but no ``=`` separator. The value is
    returned before home expansion.
    """
    text = line.rstrip("\n").strip(WHITESPACE)
    if not text or text[0] in COMMENT_CHARS:
        return None

    key, sep, value = text.partition("=")
    if not sep:
        raise ValueError(f"missing '=' in {text!r}")

    return key.strip(WHITESPACE), _strip_inline_comment(value.strip(WHITESPACE))


def iter_entries(lines: Iterable[str], *, strict: bool = False,
                 source: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None) -> Iterator[Entry]:
    """Yield an :class:`Entry` for every key/value line in *lines*.

    Entries come out in file order. Malformed lines are skipped unless
    *strict* is set, in which case :class:`MalformedLineError` is raised with
    the 1-based line number.
    """
    # HOME is read once per load.
    home = (os.environ if environ is None else environ).get("HOME")
    env = {} if home is None else {"HOME": home}

    for line_number, line in enumerate(lines, start=1):
        try:
            pair = parse_line(line)
        except ValueError:
            if strict:
                raise MalformedLineError(line_number, line.rstrip("\n"), source) from None
            logger.debug("Skipping malformed line %d in %s", line_number, source or "<text>")
            continue
        if pair is None:
            continue
        key, value = pair
        yield Entry(key, expand_home(value, env))
