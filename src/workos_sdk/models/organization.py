# Licensed under the MIT license.

"""Organization models and request parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.pagination import PaginationParams, url_encodable_list
from ..core.types import (
    OrganizationDomainId,
    OrganizationId,
    Timestamps,
    require_bool,
    require_str,
)


@dataclass(frozen=True)
class OrganizationDomain:
    """
    A domain associated with an organization.

    :param id: Domain identifier.
    :type id: str
    :param domain: The domain name, e.g. ``"foo-corp.com"``.
    :type domain: str
    """

    id: OrganizationDomainId
    domain: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "OrganizationDomain":
        return cls(
            id=OrganizationDomainId(require_str(data["id"], "id")),
            domain=require_str(data["domain"], "domain"),
        )


@dataclass(frozen=True)
class Organization:
    """
    A WorkOS organization.

    :param id: Organization identifier.
    :type id: str
    :param name: Display name.
    :type name: str
    :param allow_profiles_outside_organization: Whether SSO profiles whose email
        domain is not one of ``domains`` may sign in.
    :type allow_profiles_outside_organization: bool
    :param domains: Domains belonging to the organization.
    :type domains: list[OrganizationDomain]
    :param timestamps: Creation and update times.
    :type timestamps: ~workos_sdk.core.types.Timestamps

    Example::

        organization = client.organizations.get_organization("org_123").unwrap()
        print(organization.name, [d.domain for d in organization.domains])
    """

    id: OrganizationId
    name: str
    allow_profiles_outside_organization: bool
    domains: List[OrganizationDomain]
    timestamps: Timestamps

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Organization":
        """
        Decode an organization object.

        :param data: Parsed JSON object.
        :type data: dict[str, Any]
        :return: Decoded organization.
        :rtype: Organization
        :raises KeyError: If a required field is missing.
        :raises TypeError: If a field has the wrong type.
        """
        domains = data["domains"]
        if not isinstance(domains, list):
            raise TypeError("domains must be a list")
        return cls(
            id=OrganizationId(require_str(data["id"], "id")),
            name=require_str(data["name"], "name"),
            allow_profiles_outside_organization=require_bool(
                data["allow_profiles_outside_organization"], "allow_profiles_outside_organization"
            ),
            domains=[OrganizationDomain.from_api_response(d) for d in domains],
            timestamps=Timestamps.from_api_response(data),
        )


@dataclass(frozen=True)
class ListOrganizationsParams:
    """
    Parameters for listing organizations.

    :param pagination: Cursor parameters.
    :type pagination: ~workos_sdk.core.pagination.PaginationParams
    :param domains: Only return organizations with any of these domains.
    :type domains: list[str] | None
    """

    pagination: PaginationParams = field(default_factory=PaginationParams)
    domains: Optional[List[str]] = None

    def to_query(self) -> Dict[str, str]:
        query = self.pagination.to_query()
        if self.domains is not None:
            query["domains[]"] = url_encodable_list(self.domains)
        return query


@dataclass(frozen=True)
class CreateOrganizationParams:
    """
    Parameters for creating an organization.

    :param name: Display name.
    :param domains: Domains to associate with the organization.
    :param allow_profiles_outside_organization: Allow SSO profiles from other domains.
    """

    name: str
    domains: List[str] = field(default_factory=list)
    allow_profiles_outside_organization: Optional[bool] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"name": self.name, "domains": list(self.domains)}
        if self.allow_profiles_outside_organization is not None:
            body["allow_profiles_outside_organization"] = self.allow_profiles_outside_organization
        return body


@dataclass(frozen=True)
class UpdateOrganizationParams:
    """
    Parameters for updating an organization. Fields left as ``None`` are not sent.

    :param organization_id: Organization to update; part of the path, not the body.
    :param name: New display name.
    :param domains: Replacement domain list.
    :param allow_profiles_outside_organization: New setting.
    """

    organization_id: OrganizationId
    name: Optional[str] = None
    domains: Optional[List[str]] = None
    allow_profiles_outside_organization: Optional[bool] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.name is not None:
            body["name"] = self.name
        if self.domains is not None:
            body["domains"] = list(self.domains)
        if self.allow_profiles_outside_organization is not None:
            body["allow_profiles_outside_organization"] = self.allow_profiles_outside_organization
        return body


__all__ = [
    "Organization",
    "OrganizationDomain",
    "ListOrganizationsParams",
    "CreateOrganizationParams",
    "UpdateOrganizationParams",
]
