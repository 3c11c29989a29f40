"""Greeting messages built on top of the name validator."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .clock import DEFAULT_LOCALE, BabelDateFormatter, Clock, DateFormatter, SystemClock
from .config import GreetingConfig, coerce_config
from .core.errors import ErrorKind, LocaleFormattingError, ValidationError
from .core.result import Result, Success
from .validation import reject, validate_name

__all__ = ["DEFAULT_GREETING", "hello", "welcome"]


LOGGER = logging.getLogger(__name__)

DEFAULT_GREETING = "Hello"

_SYSTEM_CLOCK = SystemClock()
_DEFAULT_FORMATTER = BabelDateFormatter()


def _check_length(message: str, config: GreetingConfig) -> Result[str, ValidationError]:
    if config.max_length is not None and len(message) > config.max_length:
        return reject(
            f"Generated message exceeds maximum length of {config.max_length}",
            ErrorKind.LENGTH,
        )
    return Success(message)


def hello(
    name: object,
    greeting: object = None,
    config: GreetingConfig | Mapping[str, Any] | None = None,
) -> Result[str, ValidationError]:
    """Return ``"<Greeting>, <Name>!"`` for a validated ``name``.

    Parameters
    ----------
    name:
        The person to greet. Must be a non-empty string of letters, spaces,
        hyphens or apostrophes.
    greeting:
        The greeting word. Defaults to ``config.default_greeting`` and then to
        ``"Hello"``. Unless ``config.preserve_case`` is set the first character
        is upper-cased and the rest lower-cased.
    config:
        Optional :class:`~bestcode.config.GreetingConfig` or equivalent
        mapping.

    Example
    -------
    >>> hello("John", "hi").value
    'Hi, John!'
    """

    name_result = validate_name(name)
    if not name_result.success:
        return name_result

    config_result = coerce_config(GreetingConfig, config)
    if not config_result.success:
        return config_result
    options = config_result.value

    if greeting is None:
        greeting = options.default_greeting if options.default_greeting is not None else DEFAULT_GREETING

    if not isinstance(greeting, str) or not greeting.strip():
        return reject("Greeting must be a non-empty string", ErrorKind.GREETING)

    word = greeting.strip()
    if not options.preserve_case:
        word = word[0].upper() + word[1:].lower()

    return _check_length(f"{word}, {name_result.value}!", options)


def welcome(
    name: object,
    config: GreetingConfig | Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
    formatter: DateFormatter | None = None,
) -> Result[str, ValidationError]:
    """Return a French welcome message, optionally stamped with the current time.

    The timestamp is produced by ``formatter`` (Babel by default) from
    ``clock.now()`` in ``config.locale`` (``fr-FR`` by default). A locale the
    formatter cannot resolve yields a ``locale`` failure, even when the
    timestamp is excluded from the message.
    """

    name_result = validate_name(name)
    if not name_result.success:
        return name_result

    config_result = coerce_config(GreetingConfig, config)
    if not config_result.success:
        return config_result
    options = config_result.value

    locale = options.locale or DEFAULT_LOCALE
    clock = clock or _SYSTEM_CLOCK
    formatter = formatter or _DEFAULT_FORMATTER

    try:
        timestamp = formatter.format(clock.now(), locale)
    except LocaleFormattingError as exc:
        LOGGER.warning("welcome could not format the current time: %s", exc)
        return reject(f"Failed to format date with locale {locale}", ErrorKind.LOCALE)

    message = f"Bienvenue {name_result.value}!"
    if options.include_timestamp:
        message = f"{message} Il est actuellement {timestamp}"

    return _check_length(message, options)
