# Licensed under the MIT license.

"""Organization operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.pagination import PaginatedList
from ..core.results import NoError, WorkOSResult
from ..core.types import OrganizationId
from ..models.organization import (
    CreateOrganizationParams,
    ListOrganizationsParams,
    Organization,
    UpdateOrganizationParams,
)

if TYPE_CHECKING:
    from ..client import WorkOSClient


def _decode_page(body) -> PaginatedList[Organization]:
    return PaginatedList.from_api_response(body, Organization.from_api_response)


class OrganizationOperations:
    """
    Organization CRUD operations.

    Accessed via ``client.organizations``. None of these operations has a
    recognized failure status, so they return :class:`~workos_sdk.core.results.Ok`,
    :class:`~workos_sdk.core.results.Unauthorized` or
    :class:`~workos_sdk.core.results.TransportError`.

    Example::

        result = client.organizations.create_organization(
            CreateOrganizationParams(name="Foo Corp", domains=["foo-corp.com"])
        )
        organization = result.unwrap()

        page = client.organizations.list_organizations(
            ListOrganizationsParams(domains=["foo-corp.com"])
        ).unwrap()
        for org in page:
            print(org.id, org.name)
    """

    def __init__(self, client: "WorkOSClient") -> None:
        """
        Initialize OrganizationOperations.

        :param client: Parent WorkOSClient instance.
        :type client: WorkOSClient
        """
        self._client = client

    def list_organizations(
        self, params: Optional[ListOrganizationsParams] = None
    ) -> WorkOSResult[PaginatedList[Organization], NoError]:
        """
        List organizations, optionally filtered by domain.

        :param params: Filters and cursors. Defaults to the first page, newest first.
        :type params: ~workos_sdk.models.organization.ListOrganizationsParams | None
        :return: One page of organizations.
        :rtype: WorkOSResult[PaginatedList[Organization], NoError]
        """
        params = params or ListOrganizationsParams()
        return self._client._get_api()._call(
            "get", ("organizations",), params=params.to_query(), decode=_decode_page
        )

    def get_organization(self, organization_id: OrganizationId) -> WorkOSResult[Organization, NoError]:
        """
        Get an organization by ID.

        :param organization_id: Organization identifier.
        :type organization_id: str
        :return: The organization.
        :rtype: WorkOSResult[Organization, NoError]
        """
        return self._client._get_api()._call(
            "get", ("organizations", organization_id), decode=Organization.from_api_response
        )

    def create_organization(self, params: CreateOrganizationParams) -> WorkOSResult[Organization, NoError]:
        """
        Create an organization.

        :param params: Name, domains and profile policy.
        :type params: ~workos_sdk.models.organization.CreateOrganizationParams
        :return: The created organization.
        :rtype: WorkOSResult[Organization, NoError]
        """
        return self._client._get_api()._call(
            "post", ("organizations",), json=params.to_body(), decode=Organization.from_api_response
        )

    def update_organization(self, params: UpdateOrganizationParams) -> WorkOSResult[Organization, NoError]:
        """
        Update an organization. Only fields that are set are sent.

        :param params: Target organization and changed fields.
        :type params: ~workos_sdk.models.organization.UpdateOrganizationParams
        :return: The updated organization.
        :rtype: WorkOSResult[Organization, NoError]
        """
        return self._client._get_api()._call(
            "put",
            ("organizations", params.organization_id),
            json=params.to_body(),
            decode=Organization.from_api_response,
        )

    def delete_organization(self, organization_id: OrganizationId) -> WorkOSResult[None, NoError]:
        """
        Delete an organization.

        :param organization_id: Organization identifier.
        :type organization_id: str
        :return: ``Ok(None)`` on success.
        :rtype: WorkOSResult[None, NoError]
        """
        return self._client._get_api()._call("delete", ("organizations", organization_id), decode=None)
