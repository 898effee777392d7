"""Shared helpers for neatio."""

from .formatting import format_bool, format_real  # noqa: F401
from .validation import (  # noqa: F401
    ExperimentDecodeError,
    UnsupportedActivationError,
    UnsupportedEncodingError,
    ValidationError,
)

__all__ = [
    'format_real',
    'format_bool',
    'ValidationError',
    'UnsupportedEncodingError',
    'UnsupportedActivationError',
    'ExperimentDecodeError',
]
