"""Tests for error envelopes and error-code mapping."""

from __future__ import annotations

import errno

from carrots.errors import ConfigurationError, err, error_code, ok
from carrots.models import ScanResult


def test_err_envelope_defaults():
    assert err("E_CONFIG", "no home") == {
        "ok": False,
        "error": {"code": "E_CONFIG", "message": "no home", "details": {}, "nextSteps": []},
    }


def test_ok_envelope():
    assert ok({"warnings": []}) == {"ok": True, "result": {"warnings": []}}


def test_error_codes():
    assert error_code(ConfigurationError("x")) == "E_CONFIG"
    assert error_code(FileNotFoundError(errno.ENOENT, "No such file", "a")) == "E_NOT_FOUND"
    assert error_code(PermissionError(errno.EACCES, "Permission denied", "b")) == "E_PERMISSION"
    assert error_code(OSError(errno.EIO, "I/O error", "c")) == "E_TRAVERSAL"


def test_scan_result_to_dict_with_error():
    result = ScanResult(
        warnings=["a: expected chmod 0600, got 0644"],
        error=PermissionError(errno.EACCES, "Permission denied", "/locked"),
    )
    assert result.to_dict() == {
        "warnings": ["a: expected chmod 0600, got 0644"],
        "error": {"type": "PermissionError", "message": "Permission denied", "path": "/locked"},
    }
    assert result.exit_status == 1


def test_empty_scan_result_exits_zero():
    assert ScanResult().exit_status == 0
