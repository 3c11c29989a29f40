from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.fixtures.clocks import FailingFormatter, FixedClock, RecordingFormatter

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def fixed_clock() -> FixedClock:
    """Clock pinned to 2024-10-04 15:30:45."""

    return FixedClock()


@pytest.fixture()
def recording_formatter() -> RecordingFormatter:
    return RecordingFormatter()


@pytest.fixture()
def failing_formatter() -> FailingFormatter:
    return FailingFormatter()
