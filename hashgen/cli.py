#!/usr/bin/env python3
"""
HashGen command line.

Usage:
    hashgen [-D|--delete] [-V|--verbose] [--progress] <path> [<path> ...]

Writes ``<file>.hashes.txt`` next to every file found under the given
paths. Flags may appear anywhere among the paths.
"""
import sys
import logging
import argparse
from typing import List, Optional, Sequence
from . import __version__
from .processor import ProcessOptions, run


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(verbose: bool) -> None:
    """Progress lines go to stdout, failures to stderr, both as bare messages."""
    pkg_logger = logging.getLogger("hashgen")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    formatter = logging.Formatter("%(message)s")

    out = logging.StreamHandler(sys.stdout)
    out.setLevel(logging.DEBUG)
    out.addFilter(_BelowWarning())
    out.setFormatter(formatter)

    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    err.setFormatter(formatter)

    pkg_logger.addHandler(out)
    pkg_logger.addHandler(err)
    pkg_logger.setLevel(logging.INFO if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashgen",
        description="Write MD5, RIPEMD160, SHA1, SHA256, SHA384 and SHA512 digests "
                    "of each file to <file>.hashes.txt",
    )
    parser.add_argument("paths", nargs="+", metavar="path", help="Files or directories to hash")
    parser.add_argument("-D", "--delete", action="store_true",
                        help="Delete each file after its report is written")
    parser.add_argument("-V", "--verbose", action="store_true", help="Print progress messages")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


FLAG_TOKENS = frozenset([
    "-D", "--delete", "-V", "--verbose", "--progress", "--version", "-h", "--help",
])


def _split_args(argv: Sequence[str]) -> List[str]:
    """
    Reorder argv so every non-flag token reaches argparse as a path.

    A token is a flag only if it matches a flag spelling after trimming.
    Anything else, including names starting with a dash, is passed through
    unchanged after a "--" separator.
    """
    flags = []
    paths = []
    for arg in argv:
        if arg.strip() in FLAG_TOKENS:
            flags.append(arg.strip())
        else:
            paths.append(arg)
    return flags + ["--"] + paths


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(_split_args(argv))

    configure_logging(args.verbose)
    options = ProcessOptions(delete_after=args.delete, verbose=args.verbose)
    run(args.paths, options, progress=args.progress)
    return 0


if __name__ == "__main__":
    sys.exit(main())
