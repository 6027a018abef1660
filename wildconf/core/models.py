from __future__ import annotations

"""Value objects shared across the wildconf core."""

from dataclasses import dataclass

__all__ = ["Entry"]


@dataclass(frozen=True)
class Entry:
    """One parsed ``key = value`` pair.

    Entries have no identity beyond their position in a store. Both fields are
    always strings; an empty value is legal.
    """
    key: str
    value: str

    def as_line(self) -> str:
        """Return the entry rendered as a ``key = value`` line."""
        return f"{self.key} = {self.value}"
