# Licensed under the MIT license.

"""
Webhook payload models.

A webhook body is ``{"id": ..., "event": "<name>", "data": {...}}``. The event
name selects how ``data`` is decoded. Event names this SDK does not know decode
to :class:`~workos_sdk.core.known_or_unknown.Unknown` with ``data`` kept as the
raw JSON object, so new server-side events never break parsing.

Example::

    webhook = Webhook.from_api_response(json.loads(body))
    if webhook.event == Known(WebhookEventType.DSYNC_USER_CREATED):
        print(webhook.data.primary_email())
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

from ..core.known_or_unknown import Known, KnownOrUnknown, decode_known_or_unknown
from ..core.types import DirectoryId, WebhookId, raw_attributes, require_str
from .directory_sync import Directory, DirectoryGroup, DirectoryUser
from .sso import Connection


class WebhookEventType(str, Enum):
    CONNECTION_ACTIVATED = "connection.activated"
    CONNECTION_DEACTIVATED = "connection.deactivated"
    CONNECTION_DELETED = "connection.deleted"
    DSYNC_ACTIVATED = "dsync.activated"
    DSYNC_DEACTIVATED = "dsync.deactivated"
    DSYNC_DELETED = "dsync.deleted"
    DSYNC_USER_CREATED = "dsync.user.created"
    DSYNC_USER_UPDATED = "dsync.user.updated"
    DSYNC_USER_DELETED = "dsync.user.deleted"
    DSYNC_GROUP_CREATED = "dsync.group.created"
    DSYNC_GROUP_UPDATED = "dsync.group.updated"
    DSYNC_GROUP_DELETED = "dsync.group.deleted"
    DSYNC_GROUP_USER_ADDED = "dsync.group.user_added"
    DSYNC_GROUP_USER_REMOVED = "dsync.group.user_removed"


@dataclass(frozen=True)
class DirectoryUserUpdated:
    """``dsync.user.updated`` payload: the user as it is now, plus the attributes that changed."""

    directory_user: DirectoryUser
    previous_attributes: Dict[str, Any]

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "DirectoryUserUpdated":
        return cls(
            directory_user=DirectoryUser.from_api_response(data),
            previous_attributes=raw_attributes(data["previous_attributes"]),
        )


@dataclass(frozen=True)
class DirectoryGroupUpdated:
    """``dsync.group.updated`` payload."""

    directory_group: DirectoryGroup
    previous_attributes: Dict[str, Any]

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "DirectoryGroupUpdated":
        return cls(
            directory_group=DirectoryGroup.from_api_response(data),
            previous_attributes=raw_attributes(data["previous_attributes"]),
        )


@dataclass(frozen=True)
class DirectoryGroupMembership:
    """``dsync.group.user_added`` / ``dsync.group.user_removed`` payload."""

    directory_id: DirectoryId
    user: DirectoryUser
    group: DirectoryGroup

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "DirectoryGroupMembership":
        return cls(
            directory_id=DirectoryId(require_str(data["directory_id"], "directory_id")),
            user=DirectoryUser.from_api_response(data["user"]),
            group=DirectoryGroup.from_api_response(data["group"]),
        )


_PAYLOAD_DECODERS: Dict[WebhookEventType, Callable[[Dict[str, Any]], Any]] = {
    WebhookEventType.CONNECTION_ACTIVATED: Connection.from_api_response,
    WebhookEventType.CONNECTION_DEACTIVATED: Connection.from_api_response,
    WebhookEventType.CONNECTION_DELETED: Connection.from_api_response,
    WebhookEventType.DSYNC_ACTIVATED: Directory.from_api_response,
    WebhookEventType.DSYNC_DEACTIVATED: Directory.from_api_response,
    WebhookEventType.DSYNC_DELETED: Directory.from_api_response,
    WebhookEventType.DSYNC_USER_CREATED: DirectoryUser.from_api_response,
    WebhookEventType.DSYNC_USER_UPDATED: DirectoryUserUpdated.from_api_response,
    WebhookEventType.DSYNC_USER_DELETED: DirectoryUser.from_api_response,
    WebhookEventType.DSYNC_GROUP_CREATED: DirectoryGroup.from_api_response,
    WebhookEventType.DSYNC_GROUP_UPDATED: DirectoryGroupUpdated.from_api_response,
    WebhookEventType.DSYNC_GROUP_DELETED: DirectoryGroup.from_api_response,
    WebhookEventType.DSYNC_GROUP_USER_ADDED: DirectoryGroupMembership.from_api_response,
    WebhookEventType.DSYNC_GROUP_USER_REMOVED: DirectoryGroupMembership.from_api_response,
}


@dataclass(frozen=True)
class Webhook:
    """
    A decoded webhook.

    :param id: Webhook identifier.
    :type id: str
    :param event: Event name.
    :type event: Known[WebhookEventType] | Unknown
    :param data: Typed payload for known events (e.g. :class:`~workos_sdk.models.sso.Connection`
        for ``connection.activated``); the raw JSON object for unknown events.
    """

    id: WebhookId
    event: KnownOrUnknown[WebhookEventType]
    data: Any

    @property
    def is_known(self) -> bool:
        return isinstance(self.event, Known)

    @classmethod
    def from_api_response(cls, body: Dict[str, Any]) -> "Webhook":
        """
        Decode a webhook body.

        :param body: Parsed JSON body.
        :return: Decoded webhook.
        :raises KeyError: If ``id``, ``event`` or ``data`` is missing, or the payload
            of a known event lacks a required field.
        :raises TypeError: If a field has the wrong type.
        :raises ValueError: If a timestamp in the payload is malformed.
        """
        event = decode_known_or_unknown(WebhookEventType, body["event"])
        data = body["data"]
        if isinstance(event, Known):
            payload = _PAYLOAD_DECODERS[event.value](data)
        else:
            payload = raw_attributes(data)
        return cls(id=WebhookId(require_str(body["id"], "id")), event=event, data=payload)


__all__ = [
    "WebhookEventType",
    "Webhook",
    "DirectoryUserUpdated",
    "DirectoryGroupUpdated",
    "DirectoryGroupMembership",
]
