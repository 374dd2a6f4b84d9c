"""Build the Cordial transport backend from the Django settings."""

from collections.abc import Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from cordial.exceptions import CordialInvalidBackendError

DEFAULT_BACKEND = "cordial.backends.http.HttpBackend"


class ClientHandler:
    """Load the configured Cordial backend once and hand it out."""

    def __init__(self, backend=None):
        """Use the given backend definition instead of settings.CORDIAL when set."""
        self._backend = backend
        self._client = None

    @cached_property
    def backend(self):
        """Return the backend definition, read from settings.CORDIAL by default."""
        if self._backend is None:
            self._backend = getattr(settings, "CORDIAL", None)
        if not isinstance(self._backend, Mapping):
            raise ImproperlyConfigured("settings.CORDIAL is not configured")
        return dict(self._backend)

    def __call__(self):
        """Return the backend, building it on first call."""
        if self._client is None:
            self._client = self.create_client(self.backend)
        return self._client

    def create_client(self, params):
        """Import the BACKEND class and build it with PARAMETERS."""
        params = dict(params)
        backend = params.pop("BACKEND", DEFAULT_BACKEND)
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise CordialInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)
