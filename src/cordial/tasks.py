"""Cordial tasks module."""

from celery import shared_task

from cordial.contacts import Contacts


@shared_task
def create_contact(
    email: str,
    sms: str | None = None,
    attribute_list: dict | None = None,
    subscribe_status: str | None = None,
):
    """Create a contact."""
    return Contacts().create(email, sms=sms, attribute_list=attribute_list, subscribe_status=subscribe_status)


@shared_task
def update_contact(
    email: str,
    sms: str | None = None,
    attribute_list: dict | None = None,
    subscribe_status: str | None = None,
):
    """Update a contact."""
    return Contacts().update(email, sms=sms, attribute_list=attribute_list, subscribe_status=subscribe_status)


@shared_task
def unsubscribe_contact(email: str, sms: str | None = None, channel: str = "", mc_id: str = ""):
    """Unsubscribe a contact."""
    return Contacts().unsubscribe(email, sms=sms, channel=channel, mc_id=mc_id)
