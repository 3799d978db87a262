"""Data models: FileEntry, ScanResult."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FileEntry:
    path: str
    name: str
    parent: str  # base name of the containing directory
    mode: int  # permission bits, including setuid/setgid/sticky
    kind: str  # "file" | "dir" | "other"

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> FileEntry:
        """Build an entry from lstat metadata for ``path``."""
        clean = os.path.normpath(path)
        if stat.S_ISDIR(st.st_mode):
            kind = "dir"
        elif stat.S_ISREG(st.st_mode):
            kind = "file"
        else:
            kind = "other"
        return cls(
            path=path,
            name=os.path.basename(clean),
            parent=os.path.basename(os.path.dirname(clean)),
            mode=stat.S_IMODE(st.st_mode),
            kind=kind,
        )

    @property
    def is_dir(self) -> bool:
        return self.kind == "dir"


@dataclass
class ScanResult:
    """Discrepancies in visitation order, plus the first traversal error, if any."""

    warnings: list[str] = field(default_factory=list)
    error: OSError | None = None

    @property
    def exit_status(self) -> int:
        """0 when clean, 1 on any discrepancy or on an error."""
        if self.warnings:
            return 1
        if self.error is not None:
            return 1
        return 0

    def to_dict(self) -> dict[str, Any]:
        error = None
        if self.error is not None:
            error = {
                "type": type(self.error).__name__,
                "message": self.error.strerror or str(self.error),
                "path": self.error.filename,
            }
        return {"warnings": list(self.warnings), "error": error}
