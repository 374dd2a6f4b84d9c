"""Cordial contact resource."""

import logging

from cordial import client
from cordial.backends.base import BaseBackend
from cordial.carts import Cart
from cordial.payloads import build_create_or_update_body, build_unsubscribe_request, contact_path

logger = logging.getLogger(__name__)


class Contacts:
    """
    Wrap all interaction with the Cordial contact resource.

    Responses are returned as decoded by the backend. When a contact does not exist
    the API answers ``{"error": true, "message": "record not found"}``, which is
    returned as any other response.
    """

    def __init__(self, backend: BaseBackend | None = None):
        """Use the given backend, or the one configured in the settings."""
        self._backend = backend

    @property
    def backend(self):
        """Return the backend used to send requests."""
        return self._backend if self._backend is not None else client

    def find(self, email: str) -> dict:
        """Find a contact."""
        return self.backend.get(contact_path(email))

    def create(
        self,
        email: str,
        sms: str | None = None,
        attribute_list: dict | None = None,
        subscribe_status: str | None = None,
    ) -> dict:
        """
        Create a new contact.

        Fails if the contact already exists.

        Args:
            email: Contact email address
            sms: Contact phone number, adds the sms channel when given
            attribute_list: Contact attributes, must exist in the Cordial account
            subscribe_status: Status of the channels, "subscribed" forces the subscription

        Returns:
            dict: Cordial API response

        """
        body = build_create_or_update_body(email, sms, attribute_list, subscribe_status)
        return self.backend.post("/contacts", body)

    def update(
        self,
        email: str,
        sms: str | None = None,
        attribute_list: dict | None = None,
        subscribe_status: str | None = None,
    ) -> dict:
        """Update an existing contact, fails if it doesn't exist."""
        body = build_create_or_update_body(email, sms, attribute_list, subscribe_status)
        return self.backend.put(contact_path(email, prefix="email:"), body)

    def unsubscribe(self, email: str, sms: str | None = None, channel: str = "", mc_id: str = "") -> dict:
        """
        Unsubscribe a contact.

        Args:
            email: Contact email address
            sms: Contact phone number, also unsubscribed when given
            channel: Channel to unsubscribe from, such as "email"
            mc_id: Message contact id of the message the unsubscription comes from

        Returns:
            dict: Cordial API response

        """
        target = build_unsubscribe_request(email, sms, channel, mc_id)
        logger.debug("Unsubscribing Cordial contact through %s", target.path)
        return self.backend.put(target.path, target.body)

    def create_cart(self, email: str, cart: Cart | dict) -> dict:
        """Create a new contact cart."""
        if not isinstance(cart, Cart):
            cart = Cart(**cart)
        return self.backend.post(f"{contact_path(email)}/cart", cart.to_dict())
