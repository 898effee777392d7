"""Error types raised by neatio.

Every error carries a short machine-readable ``error_type`` code plus the
keyword details supplied at the raise site, so callers can branch on the code
without parsing messages.
"""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
    """Base error with a stable code and structured details."""

    def __init__(self, error_type: str, message: str, **details: Any) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extras = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"{self.message} ({extras})"


class UnsupportedEncodingError(ValidationError):
    """Unknown genome encoding selector."""

    def __init__(self, encoding: Any) -> None:
        super().__init__(
            "unsupported_encoding",
            f"Unsupported genome encoding: {encoding!r}",
            encoding=encoding,
        )


class UnsupportedActivationError(ValidationError):
    """Activation type with no registered canonical name."""

    def __init__(self, activation_type: Any) -> None:
        super().__init__(
            "unsupported_activation",
            f"Unsupported activation type: {activation_type!r}",
            activation_type=activation_type,
        )


class ExperimentDecodeError(ValidationError):
    """Persisted experiment stream ended early or held a corrupt record."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("decode_failed", message, **details)


__all__ = [
    "ValidationError",
    "UnsupportedEncodingError",
    "UnsupportedActivationError",
    "ExperimentDecodeError",
]
