"""Cordial API client module."""

from django.utils.functional import LazyObject

from .handler import ClientHandler


class DefaultClient(LazyObject):
    """Lazy object to handle the Cordial backend."""

    def _setup(self):
        """Configure the Cordial backend."""
        self._wrapped = client_handler()


client_handler = ClientHandler()
client = DefaultClient()
