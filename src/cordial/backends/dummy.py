"""Dummy Cordial backend."""

import logging

from .base import BaseBackend

logger = logging.getLogger(__name__)


class DummyBackend(BaseBackend):
    """Dummy Cordial backend doing nothing."""

    def __init__(self, **kwargs):
        """Accept and ignore any backend parameter."""

    def get(self, path: str) -> dict:
        """Pretend to send a GET request."""
        logger.debug("Dummy Cordial GET %s", path)
        return {}

    def post(self, path: str, body: dict | None = None) -> dict:
        """Pretend to send a POST request."""
        logger.debug("Dummy Cordial POST %s", path)
        return {}

    def put(self, path: str, body: dict | None = None) -> dict:
        """Pretend to send a PUT request."""
        logger.debug("Dummy Cordial PUT %s", path)
        return {}
