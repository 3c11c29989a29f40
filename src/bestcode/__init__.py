"""Validated string helpers returning explicit success or failure results.

Every public operation checks its untrusted input and returns either a
:class:`Success` carrying the formatted text or a :class:`Failure` carrying a
:class:`ValidationError` whose ``field`` names the check that failed. No
operation raises for bad input.
"""

from __future__ import annotations

from .config import GreetingConfig, StringOperationConfig
from .core import ErrorKind, Failure, Result, Success, ValidationError
from .greeting import hello, welcome
from .text import capitalize, slugify, truncate
from .validation import validate_name, validate_slug_text, validate_string

__all__ = [
    "ErrorKind",
    "Failure",
    "GreetingConfig",
    "Result",
    "StringOperationConfig",
    "Success",
    "ValidationError",
    "capitalize",
    "hello",
    "slugify",
    "truncate",
    "validate_name",
    "validate_slug_text",
    "validate_string",
    "welcome",
]

__version__ = "0.1.0"
