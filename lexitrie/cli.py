"""
CLI interface for lexitrie.

Usage:
    lexitrie build words_alpha.txt -o words.trie.gz
    lexitrie check --index words.trie.gz abash bounteousness
    lexitrie info --index words.trie.gz
"""

import argparse
import logging
import lzma
import sys
import time
import zlib
from pathlib import Path
from typing import List, Optional

from lexitrie import __version__, build_index
from lexitrie.codec import COMPRESSORS, DEFAULT_COMPRESSION, load
from lexitrie.errors import IndexFormatError, OutOfRangeError
from lexitrie.index import get_index_path

logger = logging.getLogger(__name__)


# ============================================================================
# Commands
# ============================================================================

def cmd_build(args) -> int:
    if not args.wordlist.exists():
        logger.error(f"Word list not found: {args.wordlist}")
        return 1

    start_time = time.time()
    trie = build_index(
        args.wordlist,
        args.output,
        substrings=args.substrings,
        compression=args.compression,
    )
    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds ({trie.size:,} nodes)")
    return 0


def cmd_check(args) -> int:
    trie = load(args.index, compression=args.compression)

    missing = 0
    for word in args.words:
        try:
            found = trie.contains(word)
        except OutOfRangeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(f"{word}\t{'yes' if found else 'no'}")
        if not found:
            missing += 1

    return 1 if missing else 0


def cmd_info(args) -> int:
    trie = load(args.index, compression=args.compression)
    file_size = args.index.stat().st_size

    print(f"Index:      {args.index}")
    print(f"Nodes:      {trie.size:,}")
    print(f"Memory:     {trie.size_bytes:,} bytes")
    print(f"File:       {file_size:,} bytes")
    return 0


# ============================================================================
# Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexitrie",
        description="Build and query compact word-membership indexes",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"lexitrie {__version__}",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug details",
    )
    verbosity.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    def add_compression(p):
        p.add_argument(
            "--compression", "-c",
            choices=sorted(COMPRESSORS),
            default=DEFAULT_COMPRESSION,
            help=f"Compression of the index file (default: {DEFAULT_COMPRESSION})",
        )

    build = sub.add_parser("build", help="Build an index from a word list")
    build.add_argument(
        "wordlist",
        type=Path,
        help="Text file with one word per line",
    )
    build.add_argument(
        "--output", "-o",
        type=Path,
        default=get_index_path(),
        help=f"Output index path (default: {get_index_path()})",
    )
    build.add_argument(
        "--substrings", "-s",
        action="store_true",
        help="Index every substring of each word",
    )
    add_compression(build)
    build.set_defaults(func=cmd_build)

    check = sub.add_parser("check", help="Check whether words are in an index")
    check.add_argument(
        "words",
        nargs="+",
        help="Words to look up",
    )
    check.add_argument(
        "--index", "-i",
        type=Path,
        default=get_index_path(),
        help=f"Index path (default: {get_index_path()})",
    )
    add_compression(check)
    check.set_defaults(func=cmd_check)

    info = sub.add_parser("info", help="Show index statistics")
    info.add_argument(
        "--index", "-i",
        type=Path,
        default=get_index_path(),
        help=f"Index path (default: {get_index_path()})",
    )
    add_compression(info)
    info.set_defaults(func=cmd_info)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        return args.func(args)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        return 1
    except (OSError, EOFError, zlib.error, lzma.LZMAError, IndexFormatError) as e:
        logger.error(f"Cannot read index (wrong --compression?): {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
