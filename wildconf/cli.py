from __future__ import annotations

"""Command-line front end: ``wildconf get|list|match|dump FILE ...``.

Exit codes: 0 on success / match, 1 when nothing matched, 2 when the file
could not be loaded.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from wildconf.core import ConfigStore, WildconfError, load
from wildconf.logging_config import setup_logging
from wildconf.version import get_version

__all__ = ["main", "build_parser"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_LOAD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wildconf",
        description="Query flat key = value configuration files with wildcards.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="fail on lines without '=' instead of skipping them")
    parser.add_argument("--encoding", default=None, help="file encoding (default: utf-8)")

    sub = parser.add_subparsers(dest="command", required=True)

    p_get = sub.add_parser("get", help="print the value of the first key matching PATTERN")
    p_get.add_argument("file")
    p_get.add_argument("pattern")

    p_list = sub.add_parser("list", help="print every value whose key matches PATTERN")
    p_list.add_argument("file")
    p_list.add_argument("pattern")

    p_match = sub.add_parser("match", help="test CANDIDATE against the patterns stored under KEY")
    p_match.add_argument("file")
    p_match.add_argument("key")
    p_match.add_argument("candidate")

    p_dump = sub.add_parser("dump", help="print all entries in lookup order")
    p_dump.add_argument("file")

    return parser


def _run(args: argparse.Namespace, store: ConfigStore) -> int:
    if args.command == "get":
        value = store.get(args.pattern)
        if value is None:
            return EXIT_NO_MATCH
        print(value)
        return EXIT_OK

    if args.command == "list":
        values: List[str] = store.get_list(args.pattern)
        for value in values:
            print(value)
        return EXIT_OK if values else EXIT_NO_MATCH

    if args.command == "match":
        return EXIT_OK if store.value_in_list(args.key, args.candidate) else EXIT_NO_MATCH

    for entry in store:
        print(entry.as_line())
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse *argv*, run the requested command and return the exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else None)

    try:
        store = load(args.file, strict=args.strict, encoding=args.encoding)
    except WildconfError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    with store:
        logger.debug("Running %s on %r", args.command, store)
        return _run(args, store)
