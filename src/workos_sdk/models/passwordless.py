# Licensed under the MIT license.

"""Passwordless (Magic Link) session models."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.types import PasswordlessSessionId, parse_timestamp, require_str

MAGIC_LINK = "MagicLink"


@dataclass(frozen=True)
class PasswordlessSession:
    """
    A Magic Link session.

    :param id: Session identifier.
    :type id: str
    :param email: Email address the link is for.
    :type email: str
    :param link: The Magic Link URL.
    :type link: str
    :param expires_at: When the link stops working.
    :type expires_at: :class:`datetime.datetime`
    """

    id: PasswordlessSessionId
    email: str
    link: str
    expires_at: _dt.datetime

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "PasswordlessSession":
        return cls(
            id=PasswordlessSessionId(require_str(data["id"], "id")),
            email=require_str(data["email"], "email"),
            link=require_str(data["link"], "link"),
            expires_at=parse_timestamp(data["expires_at"]),
        )


@dataclass(frozen=True)
class CreatePasswordlessSessionParams:
    """
    :param email: Email address to send the link to.
    :param redirect_uri: Override of the default redirect URI.
    :param state: Opaque value echoed back on the redirect.
    """

    email: str
    redirect_uri: Optional[str] = None
    state: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"type": MAGIC_LINK, "email": self.email}
        if self.redirect_uri is not None:
            body["redirect_uri"] = self.redirect_uri
        if self.state is not None:
            body["state"] = self.state
        return body


__all__ = ["PasswordlessSession", "CreatePasswordlessSessionParams"]
