"""CLI output: a JSON envelope on stdout, or plain text for tables and the shell.

Envelope shape::

    {"command": "edit", "status": "OK" | "ERROR", "message": "...",
     "timestamp": "...", "payload": {...}, "summary": "..."}

Error payloads always carry a stable ``code`` (see ``describe_failure``).
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from core import CommandError, FieldValidationError

STATUS_OK = "OK"
STATUS_ERROR = "ERROR"

STORAGE_ERROR_CODE = "storage_error"


def iso_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def envelope(
    command: str,
    message: str,
    *,
    ok: bool = True,
    payload: Optional[Dict[str, Any]] = None,
    summary: Optional[str] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "command": command,
        "status": STATUS_OK if ok else STATUS_ERROR,
        "message": message,
        "timestamp": iso_timestamp(),
        "payload": dict(payload or {}),
    }
    if summary:
        body["summary"] = summary
    return body


def _emit(body: Dict[str, Any]) -> None:
    print(json.dumps(body, ensure_ascii=False, indent=2))


def structured_response(
    command: str,
    *,
    message: str = "",
    payload: Optional[Dict[str, Any]] = None,
    summary: Optional[str] = None,
) -> int:
    _emit(envelope(command, message, payload=payload, summary=summary))
    return 0


def structured_error(command: str, code: str, message: str, **details: Any) -> int:
    """Print an ERROR envelope whose payload is ``{"code": code, **details}``."""
    _emit(envelope(command, message, ok=False, payload={"code": code, **details}))
    return 1


def describe_failure(exc: Exception) -> Tuple[str, str, Dict[str, Any]]:
    """Map an exception the CLI reports (instead of raising) to (code, message, details)."""
    if isinstance(exc, CommandError):
        return exc.code, exc.message, {}
    if isinstance(exc, FieldValidationError):
        return "invalid_field", str(exc), {"field": exc.field_name}
    if isinstance(exc, OSError):
        return STORAGE_ERROR_CODE, f"Could not update the data directory: {exc}", {}
    return "invalid_argument", str(exc), {}


def plain_response(message: str, body: str = "", *, exit_code: int = 0) -> int:
    """Human-readable output for table mode and the interactive shell."""
    print(message)
    if body:
        print(body)
    return exit_code


__all__ = [
    "STATUS_OK",
    "STATUS_ERROR",
    "STORAGE_ERROR_CODE",
    "iso_timestamp",
    "envelope",
    "structured_response",
    "structured_error",
    "describe_failure",
    "plain_response",
]
