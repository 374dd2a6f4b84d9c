"""Cordial exceptions module."""


class CordialError(Exception):
    """Base exception for all Cordial exceptions."""


class CordialInvalidBackendError(CordialError):
    """Exception raised when the backend is invalid."""


class CordialRequestError(CordialError):
    """Exception raised when the Cordial API cannot be reached."""
