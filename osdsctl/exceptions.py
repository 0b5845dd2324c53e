"""Custom exception classes for osdsctl."""
import json
from typing import Optional


class OsdsctlError(Exception):
    """Base exception for osdsctl errors."""
    pass


class UsageError(OsdsctlError):
    """Raised when a subcommand receives the wrong number of arguments."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(
            f"The number of args is not correct: expected {expected}, got {got}"
        )


class InputFormatError(OsdsctlError):
    """Raised when an argument cannot be parsed into the required type."""
    pass


class RemoteError(OsdsctlError):
    """Raised for any failure reported by, or while reaching, the control plane."""
    pass


class HttpError(RemoteError):
    """Raised when the control plane answers with a non-success status."""

    def __init__(self, status_code: int, body: str = "", url: Optional[str] = None):
        self.status_code = status_code
        self.body = body or ""
        self.url = url
        super().__init__(f"Code: {status_code}, URL: {url}, Body: {self.body}")

    def decode(self) -> Optional[str]:
        """Return the ``message`` field of a JSON error body, if there is one."""
        try:
            payload = json.loads(self.body)
        except ValueError:
            return None
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return None


def strip_http_error(err: Exception) -> str:
    """Reduce a remote failure to a single human-readable line."""
    if isinstance(err, HttpError):
        message = err.decode()
        if message:
            return message
        if err.body.strip():
            return err.body.strip().splitlines()[0]
        return f"HTTP {err.status_code}"
    return str(err)
