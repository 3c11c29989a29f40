"""Validated string transformations."""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Any, Mapping

from .config import StringOperationConfig, coerce_config
from .core.errors import ErrorKind, ValidationError
from .core.result import Result, Success
from .validation import DEFAULT_MAX_LENGTH, reject, validate_slug_text, validate_string

__all__ = ["capitalize", "slugify", "truncate"]


LOGGER = logging.getLogger(__name__)

DEFAULT_SLUG_LENGTH = 100
DEFAULT_TRUNCATE_LENGTH = 100
DEFAULT_SUFFIX = "..."

_INVALID_SLUG_CHARACTERS = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")
_TRAILING_SEGMENT = re.compile(r"-[^-]*$")


def _fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def capitalize(
    value: object,
    config: StringOperationConfig | Mapping[str, Any] | None = None,
) -> Result[str, ValidationError]:
    """Upper-case the first character of ``value``.

    The remainder is lower-cased unless ``config.preserve_case`` is set.
    ``config.max_length`` bounds the accepted input length.
    """

    config_result = coerce_config(StringOperationConfig, config)
    if not config_result.success:
        return config_result
    options = config_result.value

    result = validate_string(value, options.max_length or DEFAULT_MAX_LENGTH)
    if not result.success:
        return result

    text = result.value
    # Input made only of control characters sanitises to nothing.
    if not text:
        return Success("")

    rest = text[1:] if options.preserve_case else text[1:].lower()
    return Success(text[0].upper() + rest)


def slugify(
    value: object,
    config: StringOperationConfig | Mapping[str, Any] | None = None,
) -> Result[str, ValidationError]:
    """Create a lowercase, hyphen separated, URL friendly slug from ``value``.

    Accents are folded (``"Café"`` becomes ``"cafe"``), anything other than
    ASCII word characters, whitespace and hyphens is dropped and separator
    runs collapse into a single hyphen. Slugs longer than
    ``config.max_length`` (100 by default) are cut back to the last complete
    segment. Input that leaves nothing behind is a ``processing`` failure.
    """

    result = validate_slug_text(value)
    if not result.success:
        return result

    config_result = coerce_config(StringOperationConfig, config)
    if not config_result.success:
        return config_result
    options = config_result.value

    slug = _fold_accents(result.value.lower().strip())
    slug = _INVALID_SLUG_CHARACTERS.sub("", slug)
    slug = _SEPARATORS.sub("-", slug).strip("-")

    limit = options.max_length or DEFAULT_SLUG_LENGTH
    if len(slug) > limit:
        slug = _TRAILING_SEGMENT.sub("", slug[:limit])

    if not slug:
        return reject("Generated slug is empty after processing", ErrorKind.PROCESSING)

    return Success(slug)


def truncate(
    value: object,
    max_length: int = DEFAULT_TRUNCATE_LENGTH,
    suffix: str = DEFAULT_SUFFIX,
) -> Result[str, ValidationError]:
    """Shorten ``value`` to ``max_length`` characters ending with ``suffix``.

    Text that already fits is returned unchanged. A suffix longer than
    ``max_length`` is returned on its own and is not shortened further.

    Example
    -------
    >>> truncate("This is a very long text", 20).value
    'This is a very lo...'
    """

    result = validate_string(value)
    if not result.success:
        return result

    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 1:
        return reject("max_length must be an integer greater than 0", ErrorKind.PARAMETER)
    if not isinstance(suffix, str):
        return reject("suffix must be a string", ErrorKind.PARAMETER)

    text = result.value
    if len(text) <= max_length:
        return Success(text)

    keep = max(0, max_length - len(suffix))
    LOGGER.debug("truncating %d characters to %d", len(text), max_length)
    return Success(text[:keep] + suffix)
