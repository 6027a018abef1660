from __future__ import annotations

"""Function-style access to config stores.

These mirror the methods of :class:`ConfigStore` for callers that prefer
``get(store, "db.*")`` over ``store.get("db.*")``.
"""

from typing import List, Optional

from .store import ConfigStore

__all__ = ["get", "get_list", "value_in_list", "release"]


def get(store: ConfigStore, pattern: str) -> Optional[str]:
    """Return the value of the first entry whose key matches *pattern*."""
    return store.get(pattern)


def get_list(store: ConfigStore, pattern: str) -> List[str]:
    """Return every value whose key matches *pattern*, in storage order."""
    return store.get_list(pattern)


def value_in_list(store: ConfigStore, key: str, candidate: str) -> bool:
    """Return True if a value pattern stored under *key* matches *candidate*."""
    return store.value_in_list(key, candidate)


def release(store: Optional[ConfigStore]) -> None:
    """Release *store*. ``None`` and already released stores are ignored."""
    if store is None:
        return
    store.release()
