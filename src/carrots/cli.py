"""Command line entry point: ``carrots [PATH ...]``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence, TextIO

from carrots import __version__
from carrots.config import resolve_home
from carrots.errors import ConfigurationError, err, error_code, ok
from carrots.log import configure, logger
from carrots.models import ScanResult
from carrots.scanner import Scanner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carrots",
        description=(
            "Report SSH files and directories whose permission bits deviate from policy. "
            "With no PATH, scan the current directory recursively; "
            "otherwise check each PATH itself."
        ),
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="entries to check (non-recursive)")
    parser.add_argument("--json", action="store_true", help="print a single JSON envelope")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def envelope(result: ScanResult) -> dict[str, Any]:
    """Wrap a scan result; an error keeps its partial warnings in the details."""
    if result.error is None:
        return ok(result.to_dict())
    payload = result.to_dict()
    return err(
        error_code(result.error),
        payload["error"]["message"],
        {"path": payload["error"]["path"], "warnings": payload["warnings"]},
    )


def report(result: ScanResult, out: TextIO, as_json: bool = False) -> int:
    """Emit warnings (one per line) and return the process exit status."""
    if as_json:
        out.write(json.dumps(envelope(result)) + "\n")
        return result.exit_status

    for warning in result.warnings:
        out.write(warning + "\n")

    if result.error is not None:
        logger.error("%s", result.error)
    return result.exit_status


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure(logging.DEBUG if args.verbose else None)

    try:
        scanner = Scanner(resolve_home())
    except ConfigurationError as exc:
        if args.json:
            sys.stdout.write(json.dumps(err(error_code(exc), str(exc))) + "\n")
        else:
            logger.error("%s", exc)
        return 1

    if args.paths:
        result = scanner.scan_paths(args.paths)
    else:
        result = scanner.walk(".")

    return report(result, sys.stdout, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
