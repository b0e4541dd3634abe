"""Shared fixtures: a fixed clock and quiet logging."""

from datetime import datetime

import pytest

from yearwall.logger import is_silent, set_silent_mode
from yearwall.params import parse_params

# Saturday, 15 June 2024 (leap year), 12:00 UTC
FIXED_UTC_NOW = datetime(2024, 6, 15, 12, 0)


@pytest.fixture(autouse=True)
def quiet_logger():
    previous = is_silent()
    set_silent_mode(True)
    yield
    set_silent_mode(previous)


@pytest.fixture
def fixed_now():
    return FIXED_UTC_NOW


@pytest.fixture
def default_params():
    return parse_params({})
