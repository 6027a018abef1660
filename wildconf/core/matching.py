from __future__ import annotations

"""Shell-style wildcard matching used by every lookup.

Matching is delegated to :func:`fnmatch.fnmatchcase` with no extra flags:

- ``*`` matches any run of characters, including an empty one
- ``?`` matches exactly one character
- ``[abc]``, ``[a-z]`` and ``[!abc]`` match one character from (or outside) a set
- matching is case-sensitive and anchored to the whole string
- ``/`` and leading ``.`` are ordinary characters
- backslash is an ordinary character, and ``[^...]`` is *not* a negation
"""

from fnmatch import fnmatchcase
from typing import Iterable, Iterator

from .models import Entry

__all__ = ["matches", "has_magic", "iter_key_matches"]

_MAGIC_CHARS = frozenset("*?[")


def matches(pattern: str, text: str) -> bool:
    """Return True if *text* matches the wildcard *pattern*."""
    if not _MAGIC_CHARS.intersection(pattern):
        return pattern == text
    return fnmatchcase(text, pattern)


def has_magic(pattern: str) -> bool:
    """Return True if *pattern* contains any wildcard metacharacter."""
    return bool(_MAGIC_CHARS.intersection(pattern))


def iter_key_matches(entries: Iterable[Entry], pattern: str) -> Iterator[Entry]:
    """Yield the entries whose key matches *pattern*, preserving order."""
    for entry in entries:
        if matches(pattern, entry.key):
            yield entry
