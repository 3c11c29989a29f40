from __future__ import annotations

from datetime import datetime

import pytest

from bestcode import GreetingConfig, ValidationError, hello, welcome
from bestcode.core import ErrorKind


@pytest.mark.parametrize(
    "args, expected",
    [
        (("John",), "Hello, John!"),
        (("Alice", "Hi"), "Hi, Alice!"),
        (("François", "Bonjour"), "Bonjour, François!"),
        (("  Mary Jane ", "hELLO"), "Hello, Mary Jane!"),
        (("John", "  good morning  "), "Good morning, John!"),
    ],
)
def test_hello_formats_greeting(args, expected):
    result = hello(*args)
    assert result.success
    assert result.value == expected


@pytest.mark.parametrize(
    "name, kind",
    [
        (123, ErrorKind.TYPE),
        (None, ErrorKind.TYPE),
        ("   ", ErrorKind.REQUIRED),
        ("John123", ErrorKind.FORMAT),
        ("John<script>alert('xss')</script>", ErrorKind.FORMAT),
    ],
)
def test_hello_rejects_invalid_names(name, kind):
    result = hello(name)
    assert not result.success
    assert isinstance(result.error, ValidationError)
    assert result.error.field is kind


@pytest.mark.parametrize("greeting", ["", "   ", 42])
def test_hello_rejects_empty_greeting(greeting):
    assert hello("John", greeting).error.field is ErrorKind.GREETING


def test_hello_respects_max_length():
    result = hello("John", "Hello", {"maxLength": 10})
    assert result.error.field is ErrorKind.LENGTH
    assert hello("John", "Hello", {"maxLength": 12}).value == "Hello, John!"


def test_hello_preserves_case_when_configured():
    result = hello("john", "HELLO", GreetingConfig(preserve_case=True))
    assert result.value == "HELLO, john!"


def test_hello_uses_configured_default_greeting():
    assert hello("Ada", config={"defaultGreeting": "salut"}).value == "Salut, Ada!"
    assert hello("Ada", "Hey", {"defaultGreeting": "salut"}).value == "Hey, Ada!"


def test_hello_reports_invalid_configuration():
    assert hello("Ada", "Hi", {"maxLength": 0}).error.field is ErrorKind.PARAMETER


def test_welcome_includes_timestamp(fixed_clock, recording_formatter):
    result = welcome("Developer", clock=fixed_clock, formatter=recording_formatter)
    assert result.value == "Bienvenue Developer! Il est actuellement 04/10/2024 15:30:45"
    assert recording_formatter.calls == [(fixed_clock.moment, "fr-FR")]


def test_welcome_with_default_formatter(fixed_clock):
    result = welcome("Developer", clock=fixed_clock)
    assert result.success
    assert result.value.startswith("Bienvenue Developer! Il est actuellement ")
    assert "2024" in result.value
    assert "15:30:45" in result.value


def test_welcome_against_the_real_clock():
    result = welcome("Developer")
    assert result.success
    assert "Bienvenue Developer!" in result.value
    assert "Il est actuellement" in result.value


def test_welcome_without_timestamp(fixed_clock):
    result = welcome("Developer", {"includeTimestamp": False}, clock=fixed_clock)
    assert result.value == "Bienvenue Developer!"


def test_welcome_uses_configured_locale(fixed_clock, recording_formatter):
    welcome("Developer", GreetingConfig(locale="en-US"), clock=fixed_clock, formatter=recording_formatter)
    assert recording_formatter.calls[0][1] == "en-US"


def test_welcome_english_locale_formats_numeric_date(fixed_clock):
    result = welcome("Developer", {"locale": "en-US"}, clock=fixed_clock)
    assert "Bienvenue Developer!" in result.value
    assert "10/4/2024" in result.value


def test_welcome_empty_locale_falls_back_to_french(fixed_clock, recording_formatter):
    welcome("Developer", {"locale": ""}, clock=fixed_clock, formatter=recording_formatter)
    assert recording_formatter.calls[0][1] == "fr-FR"


@pytest.mark.parametrize("locale", ["not a locale", "zz-ZZ"])
def test_welcome_rejects_unknown_locale(locale, fixed_clock):
    result = welcome("Developer", {"locale": locale}, clock=fixed_clock)
    assert result.error.field is ErrorKind.LOCALE
    assert locale in result.error.message


def test_welcome_maps_formatter_failure_to_locale_error(fixed_clock, failing_formatter):
    result = welcome("Developer", clock=fixed_clock, formatter=failing_formatter)
    assert result.error.field is ErrorKind.LOCALE


def test_welcome_respects_max_length(fixed_clock, recording_formatter):
    result = welcome("Developer", {"maxLength": 20}, clock=fixed_clock, formatter=recording_formatter)
    assert result.error.field is ErrorKind.LENGTH
    short = welcome(
        "Developer",
        {"maxLength": 20, "includeTimestamp": False},
        clock=fixed_clock,
        formatter=recording_formatter,
    )
    assert short.value == "Bienvenue Developer!"


@pytest.mark.parametrize("name, kind", [(None, ErrorKind.TYPE), ("", ErrorKind.REQUIRED), ("R2-D2", ErrorKind.FORMAT)])
def test_welcome_rejects_invalid_names(name, kind):
    assert welcome(name).error.field is kind


def test_welcome_does_not_read_clock_for_invalid_names():
    class ExplodingClock:
        def now(self) -> datetime:
            raise AssertionError("clock should not be read")

    assert not welcome(42, clock=ExplodingClock()).success
