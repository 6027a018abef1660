"""Text parsing for wildconf files.

Line splitting and comment handling live in :mod:`.line_parser`; tilde and
path expansion live in :mod:`.expansion`.
"""

from .expansion import expand_home, expand_path  # noqa: F401
from .line_parser import iter_entries, parse_line  # noqa: F401

__all__: list[str] = [
    "expand_home",
    "expand_path",
    "iter_entries",
    "parse_line",
]
