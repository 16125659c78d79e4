"""Shared fixtures."""

import pytest

from capprofile.models.alert import Alert
from capprofile.profiles import GoogleProfile
from tests.builders import compliant_alert


@pytest.fixture
def profile() -> GoogleProfile:
    return GoogleProfile()


@pytest.fixture
def alert() -> Alert:
    return compliant_alert()
