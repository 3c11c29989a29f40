"""Per-call configuration models for the string operations."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic import ValidationError as SchemaError

from .core.errors import ErrorKind, ValidationError
from .core.result import Failure, Result, Success

__all__ = ["GreetingConfig", "StringOperationConfig", "coerce_config"]


LOGGER = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound="StringOperationConfig")


class StringOperationConfig(BaseModel):
    """Options recognised by :func:`~bestcode.text.capitalize` and friends."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    locale: str | None = Field(None, description="Locale identifier used for date formatting.")
    preserve_case: bool = Field(
        False,
        alias="preserveCase",
        description="Keep the casing of everything after the first character.",
    )
    max_length: PositiveInt | None = Field(
        None,
        alias="maxLength",
        description="Upper bound on the length of the input or generated text.",
    )


class GreetingConfig(StringOperationConfig):
    """Options recognised by :func:`~bestcode.greeting.hello` and :func:`~bestcode.greeting.welcome`."""

    default_greeting: str | None = Field(
        None,
        alias="defaultGreeting",
        description="Greeting used by hello() when none is passed explicitly.",
    )
    include_timestamp: bool = Field(
        True,
        alias="includeTimestamp",
        description="Append the current time to welcome messages.",
    )


def coerce_config(
    model: Type[ConfigT],
    config: ConfigT | Mapping[str, Any] | None,
) -> Result[ConfigT, ValidationError]:
    """Normalise ``config`` into an instance of ``model``.

    ``None`` yields the model defaults, instances of ``model`` are returned
    as is and mappings are validated. Anything that does not validate is
    reported as a ``parameter`` failure.
    """

    if config is None:
        return Success(model())
    if isinstance(config, model):
        return Success(config)
    if isinstance(config, BaseModel):
        config = config.model_dump(exclude_unset=True)
    if not isinstance(config, Mapping):
        LOGGER.debug("rejected configuration of type %s", type(config).__name__)
        return Failure(
            ValidationError(
                f"Configuration must be a mapping or {model.__name__}",
                ErrorKind.PARAMETER,
            )
        )

    try:
        return Success(model.model_validate(dict(config)))
    except SchemaError as exc:
        LOGGER.debug("rejected configuration: %s", exc)
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}"
            for error in exc.errors()
        )
        return Failure(ValidationError(f"Invalid configuration ({problems})", ErrorKind.PARAMETER))
