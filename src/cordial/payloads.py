"""
Request payloads for the Cordial contact resource.

All functions here are pure: they only compute paths and JSON-serializable bodies.
Optional values left to None (or empty for strings) are dropped from the output,
while empty structures such as ``keywords.undies`` are kept as they are.
"""

import json
from dataclasses import dataclass
from urllib.parse import quote

SUBSCRIBED = "subscribed"
UNSUBSCRIBED = "unsubscribed"


def contact_path(email: str, prefix: str = "") -> str:
    """Return the path of a contact, the email being escaped as a path segment."""
    return f"/contacts/{prefix}" + quote(email, safe="@:+")


@dataclass(frozen=True)
class UnsubscribeTarget:
    """Path and body of an unsubscribe request."""

    path: str
    body: dict


def build_channel_data(email: str, sms: str | None = None, subscribe_status: str | None = None) -> dict:
    """Build the ``channels`` block of a contact."""
    email_channel = {"address": email}
    if subscribe_status:
        email_channel["subscribeStatus"] = subscribe_status

    channels = {"email": email_channel}
    if sms is not None:
        undies = {}
        if subscribe_status:
            undies["ss"] = subscribe_status
        channels["sms"] = {"address": sms, "keywords": {"undies": undies}}

    return {"channels": channels}


def build_create_or_update_body(
    email: str,
    sms: str | None = None,
    attribute_list: dict | None = None,
    subscribe_status: str | None = None,
) -> dict:
    """
    Build the body used to create or update a contact.

    Keys come in this order: ``forceSubscribe`` (only for the "subscribed" status),
    ``channels``, then the caller attributes. Attributes are merged last, so an
    attribute named ``channels`` or ``forceSubscribe`` replaces the computed value.
    """
    body = {}
    if subscribe_status == SUBSCRIBED:
        body["forceSubscribe"] = True
    body.update(build_channel_data(email, sms, subscribe_status))
    body.update(attribute_list or {})
    return body


def build_unsubscribe_request(
    email: str,
    sms: str | None = None,
    channel: str | None = None,
    mc_id: str | None = None,
) -> UnsubscribeTarget:
    """
    Build the target of an unsubscribe request.

    Without channel nor mc_id the whole contact is unsubscribed, otherwise only the
    given channel for the given message contact id.
    """
    if not channel and not mc_id:
        return UnsubscribeTarget(
            path=contact_path(email),
            body=build_channel_data(email, sms, UNSUBSCRIBED),
        )

    return UnsubscribeTarget(
        path=f"{contact_path(email)}/unsubscribe/{channel or ''}",
        body={"mcID": mc_id or ""},
    )


def dump_body(body: dict) -> str:
    """Serialize a body to compact JSON and raw UTF-8, keeping the key order."""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)
