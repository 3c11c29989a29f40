"""Input validation shared by every public operation."""

from __future__ import annotations

import logging
import re

from .core.errors import ErrorKind, ValidationError
from .core.result import Failure, Result, Success

__all__ = ["reject", "validate_name", "validate_slug_text", "validate_string"]


LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 1000
NAME_MAX_LENGTH = 100
SLUG_TEXT_MAX_LENGTH = 200

_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")
_NAME_PATTERN = re.compile(r"[a-zA-ZÀ-ÿ\s'-]+")


def reject(message: str, kind: ErrorKind) -> Failure[ValidationError]:
    """Build a failure tagged with ``kind`` and log the rejection."""

    LOGGER.debug("input rejected [%s]: %s", kind.value, message)
    return Failure(ValidationError(message, kind))


def validate_string(value: object, max_length: int = DEFAULT_MAX_LENGTH) -> Result[str, ValidationError]:
    """Validate untrusted text and strip ASCII control characters.

    Parameters
    ----------
    value:
        Raw input of any type.
    max_length:
        Largest accepted length of the raw text.

    The checks run in order: type, emptiness after trimming, length. The
    sanitised text is returned untrimmed.
    """

    if not isinstance(value, str):
        return reject("Input must be a string", ErrorKind.TYPE)

    if not value.strip():
        return reject("Input cannot be empty", ErrorKind.REQUIRED)

    if len(value) > max_length:
        return reject(
            f"Input exceeds maximum length of {max_length} characters",
            ErrorKind.LENGTH,
        )

    return Success(_CONTROL_CHARACTERS.sub("", value))


def validate_name(value: object) -> Result[str, ValidationError]:
    """Validate a person's name and return it trimmed."""

    result = validate_string(value, NAME_MAX_LENGTH)
    if not result.success:
        return result

    if not _NAME_PATTERN.fullmatch(result.value):
        return reject(
            "Name can only contain letters, spaces, hyphens, and apostrophes",
            ErrorKind.FORMAT,
        )

    return Success(result.value.strip())


def validate_slug_text(value: object) -> Result[str, ValidationError]:
    """Validate text destined for :func:`~bestcode.text.slugify`."""

    return validate_string(value, SLUG_TEXT_MAX_LENGTH)
