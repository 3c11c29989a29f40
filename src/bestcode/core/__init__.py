"""Result and error primitives used across bestcode."""

from __future__ import annotations

from .errors import ErrorKind, LocaleFormattingError, ValidationError
from .result import Failure, Result, Success

__all__ = [
    "ErrorKind",
    "Failure",
    "LocaleFormattingError",
    "Result",
    "Success",
    "ValidationError",
]
