"""Cordial REST API transport over HTTP."""

import logging

import requests

from cordial.exceptions import CordialRequestError
from cordial.payloads import dump_body

from . import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .base import BaseBackend

logger = logging.getLogger(__name__)


class HttpBackend(BaseBackend):
    """
    Cordial REST API client.

    Handles:
    - Base url and basic authentication with the account API key
    - Compact JSON encoding of request bodies
    - Decoding of responses, which are returned as is, errors included
    """

    _header_accept = "application/json"

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, timeout: int | None = None):
        """Configure the HTTP backend."""
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout or DEFAULT_TIMEOUT

    @property
    def _headers(self):
        """Get HTTP headers shared by all requests."""
        return {
            "Accept": self._header_accept,
            "Content-Type": "application/json; charset=utf-8",
        }

    def get(self, path: str) -> dict:
        """Send a GET request to the Cordial API."""
        return self._request("GET", path)

    def post(self, path: str, body: dict | None = None) -> dict:
        """Send a POST request with a JSON body to the Cordial API."""
        return self._request("POST", path, body=body)

    def put(self, path: str, body: dict | None = None) -> dict:
        """Send a PUT request with a JSON body to the Cordial API."""
        return self._request("PUT", path, body=body)

    def _request(self, method, path, body=None):
        """
        Send the request and decode its response.

        Cordial answers errors with a JSON document such as
        ``{"error": true, "message": "record not found"}``: it is returned to the
        caller like any other response. Only transport failures raise.
        """
        url = f"{self.base_url}{path}"
        logger.debug("Cordial %s %s", method, url)
        try:
            response = requests.request(
                method,
                url,
                data=dump_body(body).encode("utf-8") if body is not None else None,
                headers=self._headers,
                auth=(self._api_key, ""),
                timeout=self._timeout,
            )
        except requests.RequestException as err:
            logger.exception("Cordial %s %s failed", method, url)
            raise CordialRequestError(f"Failed to reach Cordial API: {method} {path}") from err

        try:
            data = response.json()
        except ValueError:
            logger.warning("Cordial %s %s returned a non JSON response (%s)", method, url, response.status_code)
            return {}

        if isinstance(data, dict) and data.get("error"):
            logger.warning("Cordial %s %s returned an error: %s", method, url, data.get("message"))

        return data
