"""Cordial backend base module."""

from abc import ABC, abstractmethod


class BaseBackend(ABC):
    """Base class for all Cordial transport backends."""

    @abstractmethod
    def get(self, path: str) -> dict:
        """
        Send a GET request to the Cordial API.

        Args:
            path: Resource path, relative to the API base url

        Returns:
            dict: Decoded API response, error responses included

        Raises:
            CordialRequestError: If the API cannot be reached

        """

    @abstractmethod
    def post(self, path: str, body: dict | None = None) -> dict:
        """Send a POST request with a JSON body to the Cordial API."""

    @abstractmethod
    def put(self, path: str, body: dict | None = None) -> dict:
        """Send a PUT request with a JSON body to the Cordial API."""
