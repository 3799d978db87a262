"""carrots: audit permission bits of SSH credential material."""

from __future__ import annotations

__version__ = "0.1.0"
