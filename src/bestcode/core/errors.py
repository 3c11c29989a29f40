"""Error types shared by the validators and string operations."""

from __future__ import annotations

from enum import Enum

__all__ = ["ErrorKind", "LocaleFormattingError", "ValidationError"]


class ErrorKind(str, Enum):
    """Field-tags identifying which check rejected an input."""

    TYPE = "type"
    REQUIRED = "required"
    LENGTH = "length"
    FORMAT = "format"
    GREETING = "greeting"
    PROCESSING = "processing"
    PARAMETER = "parameter"
    LOCALE = "locale"


class ValidationError(ValueError):
    """Describes why an input was rejected.

    Instances are returned inside :class:`~bestcode.core.result.Failure`
    rather than raised. ``field`` is compared against :class:`ErrorKind`
    members or their plain string values, so ``error.field == "length"``
    works as expected.
    """

    def __init__(self, message: str, field: ErrorKind | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = ErrorKind(field) if field is not None else None

    def __repr__(self) -> str:
        tag = self.field.value if self.field is not None else None
        return f"{type(self).__name__}({self.message!r}, field={tag!r})"


class LocaleFormattingError(RuntimeError):
    """Raised when a timestamp cannot be rendered for a locale."""

    def __init__(self, locale: str, message: str | None = None) -> None:
        super().__init__(message or f"cannot format dates for locale {locale!r}")
        self.locale = locale
