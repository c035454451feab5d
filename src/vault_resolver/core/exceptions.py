"""Error taxonomy for secret resolution.

Every failure surfaced to the caller is a :class:`VaultError` carrying a
human-readable message and a stable machine-readable ``kind`` code.
"""

from __future__ import annotations

from typing import Any

VALIDATION_ERROR = "bolt.plugin/validation-error"
HTTP_ERROR = "bolt.plugin/vault-http-error"
CONNECT_ERROR = "CONNECT_ERROR"
UNEXPECTED_ERROR = "bolt.plugin/vault-error"


class VaultError(Exception):
    """Base exception for secret resolution failures.

    Args:
        message: Human-readable failure description.
        kind: Stable error code for machine consumers.
        details: Optional structured context (never secret values).
    """

    def __init__(self, message: str, kind: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.kind = kind
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the task-runner error document."""
        return {
            "_error": {
                "msg": self.message,
                "kind": self.kind,
                "details": self.details,
            }
        }


class ValidationError(VaultError):
    """Configuration is missing or inconsistent. Raised before any network call where possible."""

    def __init__(self, message: str) -> None:
        super().__init__(message, VALIDATION_ERROR)


class TransportError(VaultError):
    """Connection-level failure talking to the server."""

    def __init__(self, uri: str, cause: Exception) -> None:
        self.uri = uri
        self.cause = cause
        super().__init__(f"Failed to connect to {uri}: {cause}", CONNECT_ERROR)
        self.__cause__ = cause


class ServerError(VaultError):
    """The server answered with a non-2xx status.

    Args:
        status_code: HTTP status code.
        reason: HTTP reason phrase.
        errors: Error strings reported by the server, if any.
    """

    def __init__(self, status_code: int, reason: str, errors: list[str] | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.errors = errors
        message = f'{status_code} "{reason}"'
        if errors is not None:
            message += f": {';'.join(errors)}"
        super().__init__(message, HTTP_ERROR, {"status": status_code})


class DataError(VaultError):
    """The requested field is absent from an otherwise successful response."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unknown secrets field: {field}", VALIDATION_ERROR)
