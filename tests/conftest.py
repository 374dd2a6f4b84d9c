"""Fixtures for the test suite."""

import pytest
from django.utils.functional import empty

import cordial
from cordial.handler import ClientHandler


@pytest.fixture(autouse=True)
def reset_default_client(monkeypatch):
    """
    Reset the lazy Cordial client around each test.

    The handler caches the backend built from settings.CORDIAL, tests overriding
    the setting need a fresh one.
    """
    monkeypatch.setattr(cordial, "client_handler", ClientHandler())
    cordial.client._wrapped = empty
    yield
    cordial.client._wrapped = empty
