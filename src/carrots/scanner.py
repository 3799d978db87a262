"""Walker: apply the permission policy to a tree or to a list of paths."""

from __future__ import annotations

import os
from typing import Iterable

from carrots.config import resolve_home
from carrots.log import logger
from carrots.models import FileEntry, ScanResult
from carrots.rules import Rule, build_rules


class Scanner:
    """Collects permission discrepancies for one user's policy.

    The home directory is fixed at construction; the scanner itself holds no
    per-scan state, so one instance can run any number of scans.
    """

    def __init__(self, home: str) -> None:
        self.home = home
        self.rules: tuple[Rule, ...] = build_rules(home)

    def check(self, entry: FileEntry) -> list[str]:
        """Run every rule against one entry, in declaration order."""
        warnings: list[str] = []
        for rule in self.rules:
            warning = rule.check(entry)
            if warning is not None:
                logger.debug("%s: %s", rule.name, warning)
                warnings.append(warning)
        return warnings

    def walk(self, root: str) -> ScanResult:
        """Check ``root`` and everything beneath it, depth-first.

        A metadata or listing failure skips only the failing entry and what
        lies beneath it. The first such error is kept on the result; the
        remaining siblings are still checked.
        """
        result = ScanResult()
        # (path, DirEntry or None for the root); stat happens on pop
        stack: list[tuple[str, os.DirEntry | None]] = [(root, None)]

        while stack:
            path, dirent = stack.pop()
            try:
                if dirent is None:
                    st = os.lstat(path)
                else:
                    st = dirent.stat(follow_symlinks=False)
            except OSError as exc:
                self._record_error(result, path, exc)
                continue

            entry = FileEntry.from_stat(path, st)
            logger.debug("visit %s (%s, %04o)", path, entry.kind, entry.mode)
            result.warnings.extend(self.check(entry))

            if not entry.is_dir:
                continue

            try:
                with os.scandir(path) as it:
                    children = sorted(it, key=lambda e: e.name)
            except OSError as exc:
                self._record_error(result, path, exc)
                continue

            # reversed so the lexically first child is popped next
            for child in reversed(children):
                stack.append((os.path.normpath(os.path.join(path, child.name)), child))

        return result

    def scan_paths(self, paths: Iterable[str]) -> ScanResult:
        """Check each path itself, without descending into directories.

        A missing or unreadable path is recorded and skipped.
        """
        result = ScanResult()
        for path in paths:
            try:
                st = os.lstat(path)
            except OSError as exc:
                self._record_error(result, path, exc)
                continue
            result.warnings.extend(self.check(FileEntry.from_stat(path, st)))
        return result

    def _record_error(self, result: ScanResult, path: str, exc: OSError) -> None:
        logger.info("skipping %s: %s", path, exc)
        if result.error is None:
            result.error = exc


def scan(root: str = ".", home: str | None = None) -> ScanResult:
    """Recursively scan ``root``. Resolves the home directory when none is given."""
    if home is None:
        home = resolve_home()
    return Scanner(home).walk(root)


def scan_paths(paths: Iterable[str], home: str | None = None) -> ScanResult:
    """Scan each of ``paths`` non-recursively."""
    if home is None:
        home = resolve_home()
    return Scanner(home).scan_paths(paths)
