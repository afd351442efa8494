"""Alarm error types.

Every failure reported to a caller is one of these. Standard error codes:
- INVALID_REQUEST: Missing, unparseable or out-of-order soft/hard limits
- WINDOW_TOO_SMALL: Soft/hard gap too small to produce any samples
- WINDOW_TOO_LARGE: Sampled window exceeds the configured sample cap
- INTERNAL_ERROR: Unexpected failure while planning an alarm
"""

from __future__ import annotations

from typing import Any

EXAMPLE_PAYLOAD = {
    "soft": "2024-01-15T06:00:00.000Z",
    "hard": "2024-01-15T06:05:00.000Z",
}


class AlarmError(Exception):
    """Base exception for alarm planning errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable message returned to the caller
        status_code: HTTP status the error maps to
    """

    code = "ALARM_ERROR"
    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(AlarmError):
    """Raised when soft/hard limits are missing, invalid, or out of order."""

    code = "INVALID_REQUEST"

    def __init__(self, message: str, example: dict[str, str] | None = None) -> None:
        self.example = example
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if self.example is not None:
            payload["example"] = self.example
        return payload


class DegenerateWindowError(AlarmError):
    """Raised when the sampled window yields no sleep samples."""

    code = "WINDOW_TOO_SMALL"

    def __init__(self, elapsed_seconds: int) -> None:
        self.elapsed_seconds = elapsed_seconds
        super().__init__("Time difference too small to generate meaningful data")


class WindowTooLargeError(AlarmError):
    """Raised when the sampled window exceeds the configured sample cap."""

    code = "WINDOW_TOO_LARGE"

    def __init__(self, array_size: int, max_array_size: int) -> None:
        self.array_size = array_size
        self.max_array_size = max_array_size
        super().__init__(
            f"Time difference too large: {array_size} samples exceeds the limit of {max_array_size}"
        )


class InternalError(AlarmError):
    """Unexpected failure. Only the original message is exposed."""

    code = "INTERNAL_ERROR"
    status_code = 500

    @classmethod
    def from_exception(cls, error: Exception) -> InternalError:
        return cls(str(error))

    def to_payload(self) -> dict[str, Any]:
        return {"error": "Internal server error", "message": self.message}

