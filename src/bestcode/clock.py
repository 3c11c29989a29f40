"""Wall-clock and locale-aware date formatting capabilities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from babel.core import Locale, UnknownLocaleError
from babel.dates import format_skeleton, format_time

from .core.errors import LocaleFormattingError

__all__ = [
    "BabelDateFormatter",
    "Clock",
    "DEFAULT_LOCALE",
    "DateFormatter",
    "SystemClock",
    "parse_locale",
]


DEFAULT_LOCALE = "fr-FR"


class Clock(Protocol):
    """Source of the current moment."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Clock reading the local wall time."""

    def now(self) -> datetime:
        return datetime.now()


class DateFormatter(ABC):
    """Render a moment as human readable text for a locale."""

    @abstractmethod
    def format(self, moment: datetime, locale: str) -> str:
        """Return ``moment`` formatted for ``locale``.

        Implementations raise :class:`LocaleFormattingError` when ``locale``
        cannot be resolved.
        """


def parse_locale(identifier: str) -> Locale:
    """Resolve ``identifier`` (``fr-FR`` or ``fr_FR``) into a Babel locale."""

    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise LocaleFormattingError(identifier) from exc


@dataclass(slots=True)
class BabelDateFormatter(DateFormatter):
    """Format timestamps with the CLDR data shipped by Babel.

    The output is a numeric date followed by the time, which renders as
    ``04/10/2024 15:30:45`` for ``fr-FR``.
    """

    date_skeleton: str = "yMd"
    time_format: str = "medium"

    def format(self, moment: datetime, locale: str) -> str:
        resolved = parse_locale(locale)
        try:
            date_part = format_skeleton(self.date_skeleton, moment, locale=resolved)
            time_part = format_time(moment, self.time_format, locale=resolved)
        except (KeyError, ValueError) as exc:
            raise LocaleFormattingError(locale, f"cannot format dates for locale {locale!r}: {exc}") from exc
        return f"{date_part} {time_part}"
