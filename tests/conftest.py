"""Shared fixtures."""
import pytest
import requests

from tests.fakes import RecordingSleep


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("connection refused")
