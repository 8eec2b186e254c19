# Licensed under the MIT license.

"""
Identifier types, timestamps and other small wire types shared across resources.

Identifiers are distinct :func:`typing.NewType` wrappers over :class:`str`, so a
type checker rejects an ``OrganizationId`` where a ``ConnectionId`` is expected.
They are not validated; an empty string is passed to the server unchanged.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Any, Dict, NewType, Optional

from dateutil.parser import isoparse

ApiKey = NewType("ApiKey", str)
ClientId = NewType("ClientId", str)
AuthorizationCode = NewType("AuthorizationCode", str)
AccessToken = NewType("AccessToken", str)
MfaCode = NewType("MfaCode", str)

OrganizationId = NewType("OrganizationId", str)
OrganizationDomainId = NewType("OrganizationDomainId", str)
ConnectionId = NewType("ConnectionId", str)
ProfileId = NewType("ProfileId", str)
DirectoryId = NewType("DirectoryId", str)
DirectoryUserId = NewType("DirectoryUserId", str)
DirectoryGroupId = NewType("DirectoryGroupId", str)
AuthenticationFactorId = NewType("AuthenticationFactorId", str)
AuthenticationChallengeId = NewType("AuthenticationChallengeId", str)
PasswordlessSessionId = NewType("PasswordlessSessionId", str)
UserId = NewType("UserId", str)
WebhookId = NewType("WebhookId", str)

# Arbitrary JSON attributes forwarded from an identity provider.
RawAttributes = Dict[str, Any]


def parse_timestamp(value: str) -> _dt.datetime:
    """
    Parse an RFC3339 timestamp into a timezone-aware :class:`datetime.datetime`.

    :param value: Timestamp such as ``"2021-06-25T19:07:33.155Z"``.
    :type value: :class:`str`
    :return: Offset-aware datetime.
    :rtype: :class:`datetime.datetime`
    :raises TypeError: If ``value`` is not a string.
    :raises ValueError: If ``value`` is not RFC3339 or lacks an offset.
    """
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    parsed = isoparse(value)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no UTC offset: {value!r}")
    return parsed


def parse_optional_timestamp(value: Optional[str]) -> Optional[_dt.datetime]:
    return None if value is None else parse_timestamp(value)


def format_timestamp(value: _dt.datetime) -> str:
    """Format an aware datetime as RFC3339, using ``Z`` for UTC."""
    text = value.isoformat(timespec="milliseconds")
    return text[:-6] + "Z" if text.endswith("+00:00") else text


@dataclass(frozen=True)
class Timestamps:
    """
    Creation and last-update times carried by most resources.

    :param created_at: When the resource was created.
    :type created_at: :class:`datetime.datetime`
    :param updated_at: When the resource was last updated.
    :type updated_at: :class:`datetime.datetime`
    """

    created_at: _dt.datetime
    updated_at: _dt.datetime

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Timestamps":
        return cls(
            created_at=parse_timestamp(data["created_at"]),
            updated_at=parse_timestamp(data["updated_at"]),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }


def raw_attributes(value: Any) -> RawAttributes:
    """Validate a raw attribute object from a response; ``None`` becomes an empty dict."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"attributes must be an object, got {type(value).__name__}")
    return dict(value)


def require_str(value: Any, name: str) -> str:
    """Return ``value`` if it is a string, otherwise raise :class:`TypeError`."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def optional_str(value: Any, name: str) -> Optional[str]:
    return None if value is None else require_str(value, name)


def require_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a boolean, got {type(value).__name__}")
    return value


__all__ = [
    "ApiKey",
    "ClientId",
    "AuthorizationCode",
    "AccessToken",
    "MfaCode",
    "OrganizationId",
    "OrganizationDomainId",
    "ConnectionId",
    "ProfileId",
    "DirectoryId",
    "DirectoryUserId",
    "DirectoryGroupId",
    "AuthenticationFactorId",
    "AuthenticationChallengeId",
    "PasswordlessSessionId",
    "UserId",
    "WebhookId",
    "RawAttributes",
    "Timestamps",
    "parse_timestamp",
    "parse_optional_timestamp",
    "format_timestamp",
]
