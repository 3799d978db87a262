"""Error taxonomy: configuration failure plus structured error/success envelopes."""

from __future__ import annotations

from typing import Any


class ConfigurationError(RuntimeError):
    """The scan cannot start, e.g. the home directory is unresolvable."""


def err(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    next_steps: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a structured error envelope."""
    return {
        "ok": False,
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "nextSteps": next_steps or [],
        },
    }


def ok(result: dict[str, Any]) -> dict[str, Any]:
    """Build a structured success envelope."""
    return {"ok": True, "result": result}


def error_code(exc: BaseException) -> str:
    """Map a traversal or configuration failure to an envelope code."""
    if isinstance(exc, ConfigurationError):
        return "E_CONFIG"
    if isinstance(exc, FileNotFoundError):
        return "E_NOT_FOUND"
    if isinstance(exc, PermissionError):
        return "E_PERMISSION"
    return "E_TRAVERSAL"
