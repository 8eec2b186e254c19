# Licensed under the MIT license.

"""Admin Portal operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.results import NoError, WorkOSResult
from ..models.admin_portal import GeneratePortalLinkParams, PortalLink

if TYPE_CHECKING:
    from ..client import WorkOSClient


class AdminPortalOperations:
    """
    Admin Portal operations. Accessed via ``client.admin_portal``.

    Example::

        link = client.admin_portal.generate_portal_link(
            GeneratePortalLinkParams("org_123", AdminPortalIntent.SSO)
        ).unwrap()
        print(link.link)
    """

    def __init__(self, client: "WorkOSClient") -> None:
        self._client = client

    def generate_portal_link(self, params: GeneratePortalLinkParams) -> WorkOSResult[PortalLink, NoError]:
        """
        Generate a short-lived Admin Portal link for an organization.

        :param params: Organization, intent and optional return URL.
        :type params: ~workos_sdk.models.admin_portal.GeneratePortalLinkParams
        :rtype: WorkOSResult[PortalLink, NoError]
        """
        return self._client._get_api()._call(
            "post", ("portal", "generate_link"), json=params.to_body(), decode=PortalLink.from_api_response
        )
