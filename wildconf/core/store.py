from __future__ import annotations

"""In-memory store of parsed configuration entries and its lookups.

Storage order
-------------
Entries are kept most-recent-first: every newly parsed entry is inserted at
the front. A lookup that returns "the first match" therefore returns the
*last* matching line of the file, so a later ``x = 2`` overrides an earlier
``x = 1``.

Lifetime
--------
A store is built once by the loader and never mutated afterwards apart from
:meth:`ConfigStore.release`, which drops every entry and flips a released
flag. Releasing twice is a no-op; looking anything up after release raises
:class:`StoreReleasedError`. Concurrent read-only lookups are fine; release
must not race with them.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .exceptions import StoreReleasedError
from .matching import iter_key_matches, matches
from .models import Entry

__all__ = ["ConfigStore"]

logger = logging.getLogger(__name__)


class ConfigStore:
    """Ordered collection of :class:`Entry` objects with wildcard lookups.

    Parameters
    ----------
    entries : iterable of Entry, optional
        Entries in *file* order. Each one is prepended, so the store ends up
        holding them in reverse.
    source : str, optional
        Path the entries were loaded from, for diagnostics.

    Examples
    --------
    >>> store = ConfigStore([Entry("x", "1"), Entry("x", "2")])
    >>> store.get("x")
    '2'
    >>> store.get_list("x")
    ['2', '1']
    """

    def __init__(self, entries: Optional[Iterable[Entry]] = None,
                 source: Optional[str] = None) -> None:
        # Reversing once gives the same order as prepending each entry.
        self._entries: List[Entry] = list(entries or ())
        self._entries.reverse()
        self._released: bool = False
        self.source = source

    # --------------------------------------------------------------------- API

    def get(self, pattern: str) -> Optional[str]:
        """Return the value of the first entry whose key matches *pattern*.

        Returns ``None`` when no key matches.
        """
        for entry in iter_key_matches(self._live_entries(), pattern):
            return entry.value
        return None

    def get_list(self, pattern: str) -> List[str]:
        """Return the values of every entry whose key matches *pattern*.

        Values come back in storage order. An empty list means nothing
        matched.
        """
        return [entry.value for entry in iter_key_matches(self._live_entries(), pattern)]

    def value_in_list(self, key: str, candidate: str) -> bool:
        """Return True if a value stored under *key* matches *candidate*.

        The key is compared exactly; each stored value is treated as a
        wildcard pattern and tested against *candidate*.
        """
        for entry in self._live_entries():
            if entry.key == key and matches(entry.value, candidate):
                return True
        return False

    def release(self) -> None:
        """Drop all entries and mark the store released. Idempotent."""
        if self._released:
            return
        logger.debug("Releasing store %s (%d entries)", self.source or "<memory>",
                     len(self._entries))
        self._entries.clear()
        self._released = True

    # ---------------------------------------------------------------- helpers

    @property
    def released(self) -> bool:
        return self._released

    @property
    def entries(self) -> Tuple[Entry, ...]:
        """Snapshot of the entries in storage order."""
        return tuple(self._live_entries())

    def _live_entries(self) -> List[Entry]:
        if self._released:
            raise StoreReleasedError("lookup on a released config store", self.source)
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __contains__(self, pattern: object) -> bool:
        if not isinstance(pattern, str):
            return False
        return self.get(pattern) is not None

    def __enter__(self) -> "ConfigStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else f"{len(self._entries)} entries"
        return f"<ConfigStore source={self.source!r} {state}>"
