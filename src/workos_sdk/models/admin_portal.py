# Licensed under the MIT license.

"""Admin Portal link models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..core.known_or_unknown import KnownOrUnknown, encode_known_or_unknown, known_or_unknown
from ..core.types import OrganizationId, require_str


class AdminPortalIntent(str, Enum):
    """What the Admin Portal session is used to set up."""

    SSO = "sso"
    DIRECTORY_SYNC = "dsync"


@dataclass(frozen=True)
class GeneratePortalLinkParams:
    """
    :param organization_id: Organization the portal session targets.
    :param intent: Setup flow to open.
    :param return_url: Where the portal links back to when setup is done.
    """

    organization_id: OrganizationId
    intent: Union[AdminPortalIntent, str, KnownOrUnknown[AdminPortalIntent]]
    return_url: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "organization": self.organization_id,
            "intent": encode_known_or_unknown(known_or_unknown(AdminPortalIntent, self.intent)),
        }
        if self.return_url is not None:
            body["return_url"] = self.return_url
        return body


@dataclass(frozen=True)
class PortalLink:
    """An ephemeral Admin Portal URL."""

    link: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "PortalLink":
        return cls(link=require_str(data["link"], "link"))


__all__ = ["AdminPortalIntent", "GeneratePortalLinkParams", "PortalLink"]
