"""Test the Cordial lazy client."""

from cordial import client
from cordial.backends.dummy import DummyBackend


def test_lazy_client(settings):
    """Test the Cordial lazy client."""
    settings.CORDIAL = {
        "BACKEND": "cordial.backends.dummy.DummyBackend",
    }
    assert isinstance(client, DummyBackend)
