"""Exceptions raised by the TMS client."""

from __future__ import annotations

from typing import Any

DEFAULT_ERROR_MESSAGE = "An error occurred"


class TMSError(Exception):
    """Base class for every error raised by the SDK."""


class TMSApiError(TMSError):
    """The API answered, and the answer is a failure.

    Covers non-2xx responses as well as 2xx responses in the legacy
    ``{"code": <non-zero>, "success": false}`` shape.
    """

    def __init__(
        self,
        code: Any,
        message: str = DEFAULT_ERROR_MESSAGE,
        *,
        details: Any = None,
        status_code: int | None = None,
        is_legacy: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        self.is_legacy = is_legacy

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code,
        }


class TMSTransportError(TMSError):
    """No usable response body: network failure, timeout or a non-JSON body."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TMSTimeoutError(TMSTransportError):
    """The request did not complete within the configured timeout."""
