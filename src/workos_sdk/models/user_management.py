# Licensed under the MIT license.

"""User Management models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core._error_codes import USER_NOT_FOUND
from ..core.types import (
    AuthorizationCode,
    ClientId,
    OrganizationId,
    Timestamps,
    UserId,
    optional_str,
    require_bool,
    require_str,
)


@dataclass(frozen=True)
class User:
    """
    A User Management user.

    :param id: User identifier.
    :param email: Email address.
    :param first_name: Given name, if set.
    :param last_name: Family name, if set.
    :param email_verified: Whether the email address has been verified.
    :param profile_picture_url: Avatar URL, if any.
    :param timestamps: Creation and update times.
    """

    id: UserId
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    email_verified: bool
    timestamps: Timestamps
    profile_picture_url: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=UserId(require_str(data["id"], "id")),
            email=require_str(data["email"], "email"),
            first_name=optional_str(data.get("first_name"), "first_name"),
            last_name=optional_str(data.get("last_name"), "last_name"),
            email_verified=require_bool(data["email_verified"], "email_verified"),
            timestamps=Timestamps.from_api_response(data),
            profile_picture_url=optional_str(data.get("profile_picture_url"), "profile_picture_url"),
        )


@dataclass(frozen=True)
class AuthenticateWithCodeParams:
    """
    :param client_id: WorkOS client ID of the application.
    :param code: Authorization code from the redirect.
    :param ip_address: IP address of the user's browser, recorded with the session.
    :param user_agent: User agent of the user's browser, recorded with the session.
    """

    client_id: ClientId
    code: AuthorizationCode
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


@dataclass(frozen=True)
class AuthenticateWithCodeResponse:
    """The authenticated user and, if they signed in through one, their organization."""

    user: User
    organization_id: Optional[OrganizationId] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "AuthenticateWithCodeResponse":
        organization_id = optional_str(data.get("organization_id"), "organization_id")
        return cls(
            user=User.from_api_response(data["user"]),
            organization_id=OrganizationId(organization_id) if organization_id is not None else None,
        )


@dataclass(frozen=True)
class GetUserError:
    """
    Recognized failure of :meth:`~workos_sdk.operations.user_management.UserManagementOperations.get_user`.

    :param error: Error kind; ``"not_found"`` for HTTP 404.
    :param error_description: Response body text.
    """

    error: str
    error_description: str

    @classmethod
    def not_found(cls, body: str) -> "GetUserError":
        return cls(USER_NOT_FOUND, body)

    def __str__(self) -> str:
        return f"{self.error}: {self.error_description}"


__all__ = ["User", "AuthenticateWithCodeParams", "AuthenticateWithCodeResponse", "GetUserError"]
