#!/usr/bin/env python3
"""
Magic Byte Scanner — Entry Point.

Usage:
    python main.py FILE [FILE ...]            # scan files
    python main.py -H hashes.txt FILE         # custom digest list
    cat blob.bin | python main.py -           # scan stdin
    python main.py --json FILE                # machine-readable output
    python main.py --list-signatures          # show loaded signatures
"""

APP_VERSION = "1.0.0"

import sys
import json
import logging
import argparse

from magicscan.database import DEFAULT_HASH_LIST_PATH, initialize
from magicscan.hashlist import HashListError
from magicscan.parallel import ParallelScanConfig
from magicscan.scanner import MagicScanner, describe

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_LOAD_ERROR = 2


def _configure_logging(verbose: bool):
    # stderr only, stdout carries results
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _read_input(name: str) -> bytes:
    if name == "-":
        return sys.stdin.buffer.read()
    with open(name, "rb") as f:
        return f.read()


def _fmt(n):
    s = float(n)
    for u in ("B", "KB", "MB", "GB"):
        if s < 1024:
            return f"{s:.1f} {u}"
        s /= 1024
    return f"{s:.1f} TB"


def list_signatures(db):
    print("=" * 60)
    print(f"  Static signatures ({len(db.static)})")
    print("=" * 60)
    for sig in db.static:
        print(f"  {sig.label:24s} {sig.hex}")
    print()
    print(f"  Digest signatures: {len(db.digests)}")


def scan_inputs(scanner: MagicScanner, inputs: list[str], as_json: bool) -> int:
    status = EXIT_OK
    report = {}

    for name in inputs:
        try:
            data = _read_input(name)
        except OSError as e:
            logger.error("Cannot read %s: %s", name, e)
            status = EXIT_INPUT_ERROR
            if as_json:
                report[name] = {"error": str(e)}
            else:
                print(f"{name}: error: {e}")
            continue

        matches = scanner.search(data)

        if as_json:
            report[name] = [m.to_dict() for m in matches]
            continue

        print(f"{name}  ({_fmt(len(data))}, {len(matches)} match(es))")
        if not matches:
            print("    no signatures found")
        for m in matches:
            print(f"    {describe(m)}")

    if as_json:
        json.dump(report, sys.stdout, indent=2)
        sys.stdout.write("\n")

    return status


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="magicscan",
        description="Find known file signatures and leaked-document digests in raw data.")
    parser.add_argument("inputs", nargs="*", metavar="FILE",
                        help="Files to scan ('-' for stdin)")
    parser.add_argument("-H", "--hashes", default=DEFAULT_HASH_LIST_PATH,
                        help="Digest hash list (default: %(default)s)")
    parser.add_argument("--sequential", action="store_true",
                        help="Run the four scan partitions one after another")
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("--list-signatures", action="store_true",
                        help="Print the loaded signatures and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {APP_VERSION}")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    # Nothing is scanned unless the full digest list loaded
    try:
        db = initialize(args.hashes)
    except HashListError as e:
        logger.error("Failed to load signature database: %s", e)
        return EXIT_LOAD_ERROR

    if args.list_signatures:
        list_signatures(db)
        return EXIT_OK

    if not args.inputs:
        parser.error("no input files given")

    scanner = MagicScanner(db, ParallelScanConfig(concurrent=not args.sequential))
    return scan_inputs(scanner, args.inputs, args.json)


if __name__ == "__main__":
    sys.exit(main())
