"""Cordial transport backends module."""

DEFAULT_BASE_URL = "https://api.cordial.io/v1"
DEFAULT_TIMEOUT = 10
