# Licensed under the MIT license.

"""
Directory Sync models: directories, directory users and directory groups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..core.known_or_unknown import (
    KnownOrUnknown,
    decode_known_or_unknown,
    encode_known_or_unknown,
    known_or_unknown,
)
from ..core.pagination import PaginationParams
from ..core.types import (
    DirectoryGroupId,
    DirectoryId,
    DirectoryUserId,
    OrganizationId,
    RawAttributes,
    Timestamps,
    optional_str,
    raw_attributes,
    require_str,
)


class DirectoryType(str, Enum):
    """Directory provider. Tokens are lowercase with spaces and must match exactly."""

    AZURE_SCIM_V2_0 = "azure scim v2.0"
    BAMBOO_HR = "bamboohr"
    BREATHE_HR = "breathe hr"
    CYBER_ARK_SCIM_V2_0 = "cyberark scim v2.0"
    GENERIC_SCIM_V1_1 = "generic scim v1.1"
    GENERIC_SCIM_V2_0 = "generic scim v2.0"
    GSUITE_DIRECTORY = "gsuite directory"
    HIBOB = "hibob"
    JUMP_CLOUD_SCIM_V2_0 = "jump cloud scim v2.0"
    OKTA_SCIM_V1_1 = "okta scim v1.1"
    OKTA_SCIM_V2_0 = "okta scim v2.0"
    ONE_LOGIN_SCIM_V2_0 = "onelogin scim v2.0"
    PEOPLE_HR = "people hr"
    PING_FEDERATE_SCIM_V2_0 = "pingfederate scim v2.0"
    RIPPLING = "rippling"
    WORKDAY = "workday"


class DirectoryState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETING = "deleting"


class DirectoryUserState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


def _optional_organization_id(data: Dict[str, Any]) -> Optional[OrganizationId]:
    value = optional_str(data.get("organization_id"), "organization_id")
    return OrganizationId(value) if value is not None else None


@dataclass(frozen=True)
class Directory:
    """
    A directory connected to an organization.

    :param id: Directory identifier.
    :type id: str
    :param organization_id: Owning organization, if any.
    :type organization_id: str | None
    :param type: Directory provider.
    :type type: Known[DirectoryType] | Unknown
    :param state: Linking state.
    :type state: Known[DirectoryState] | Unknown
    :param name: Display name.
    :type name: str
    :param domain: Primary domain, when the server includes it.
    :type domain: str | None
    :param timestamps: Creation and update times.
    :type timestamps: ~workos_sdk.core.types.Timestamps
    """

    id: DirectoryId
    organization_id: Optional[OrganizationId]
    type: KnownOrUnknown[DirectoryType]
    state: KnownOrUnknown[DirectoryState]
    name: str
    timestamps: Timestamps
    domain: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Directory":
        return cls(
            id=DirectoryId(require_str(data["id"], "id")),
            organization_id=_optional_organization_id(data),
            type=decode_known_or_unknown(DirectoryType, data["type"]),
            state=decode_known_or_unknown(DirectoryState, data["state"]),
            name=require_str(data["name"], "name"),
            timestamps=Timestamps.from_api_response(data),
            domain=optional_str(data.get("domain"), "domain"),
        )


@dataclass(frozen=True)
class DirectoryUserEmail:
    """An email address of a directory user. All fields are optional on the wire."""

    primary: Optional[bool] = None
    type: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "DirectoryUserEmail":
        primary = data.get("primary")
        if primary is not None and not isinstance(primary, bool):
            raise TypeError("primary must be a boolean")
        return cls(
            primary=primary,
            type=optional_str(data.get("type"), "type"),
            value=optional_str(data.get("value"), "value"),
        )


@dataclass(frozen=True)
class DirectoryUser:
    """
    A user provisioned from a directory.

    :param id: Directory user identifier.
    :param idp_id: Identifier assigned by the directory provider.
    :param directory_id: Directory the user belongs to.
    :param organization_id: Organization of the directory, if any.
    :param username: Username, if provided.
    :param emails: Email addresses.
    :param first_name: Given name, if provided.
    :param last_name: Family name, if provided.
    :param state: Provisioning state.
    :param custom_attributes: Attributes mapped through the dashboard.
    :param raw_attributes: Attributes exactly as the provider sent them.
    :param timestamps: Creation and update times.
    """

    id: DirectoryUserId
    idp_id: str
    directory_id: DirectoryId
    organization_id: Optional[OrganizationId]
    username: Optional[str]
    emails: List[DirectoryUserEmail]
    first_name: Optional[str]
    last_name: Optional[str]
    state: KnownOrUnknown[DirectoryUserState]
    custom_attributes: Dict[str, Any]
    raw_attributes: RawAttributes
    timestamps: Timestamps

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "DirectoryUser":
        emails = data["emails"]
        if not isinstance(emails, list):
            raise TypeError("emails must be a list")
        return cls(
            id=DirectoryUserId(require_str(data["id"], "id")),
            idp_id=require_str(data["idp_id"], "idp_id"),
            directory_id=DirectoryId(require_str(data["directory_id"], "directory_id")),
            organization_id=_optional_organization_id(data),
            username=optional_str(data.get("username"), "username"),
            emails=[DirectoryUserEmail.from_api_response(e) for e in emails],
            first_name=optional_str(data.get("first_name"), "first_name"),
            last_name=optional_str(data.get("last_name"), "last_name"),
            state=decode_known_or_unknown(DirectoryUserState, data["state"]),
            custom_attributes=raw_attributes(data.get("custom_attributes")),
            raw_attributes=raw_attributes(data.get("raw_attributes")),
            timestamps=Timestamps.from_api_response(data),
        )

    def primary_email(self) -> Optional[DirectoryUserEmail]:
        """
        Return the email flagged as primary.

        :return: The primary email, or ``None`` if no email is flagged primary.
        :rtype: DirectoryUserEmail | None
        """
        for email in self.emails:
            if email.primary is True:
                return email
        return None


@dataclass(frozen=True)
class DirectoryGroup:
    """
    A group provisioned from a directory.

    :param id: Directory group identifier.
    :param idp_id: Identifier assigned by the directory provider.
    :param directory_id: Directory the group belongs to.
    :param organization_id: Organization of the directory, if any.
    :param name: Group name.
    :param raw_attributes: Attributes exactly as the provider sent them.
    :param timestamps: Creation and update times.
    """

    id: DirectoryGroupId
    idp_id: str
    directory_id: DirectoryId
    organization_id: Optional[OrganizationId]
    name: str
    raw_attributes: RawAttributes
    timestamps: Timestamps

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "DirectoryGroup":
        return cls(
            id=DirectoryGroupId(require_str(data["id"], "id")),
            idp_id=require_str(data["idp_id"], "idp_id"),
            directory_id=DirectoryId(require_str(data["directory_id"], "directory_id")),
            organization_id=_optional_organization_id(data),
            name=require_str(data["name"], "name"),
            raw_attributes=raw_attributes(data.get("raw_attributes")),
            timestamps=Timestamps.from_api_response(data),
        )


@dataclass(frozen=True)
class ListDirectoriesParams:
    """
    Parameters for listing directories.

    :param pagination: Cursor parameters.
    :param organization_id: Only directories of this organization.
    :param directory_type: Only directories of this type.
    :param domain: Only directories with this domain.
    :param search: Only directories whose name contains this text.
    """

    pagination: PaginationParams = field(default_factory=PaginationParams)
    organization_id: Optional[OrganizationId] = None
    directory_type: Optional[Union[DirectoryType, str, KnownOrUnknown[DirectoryType]]] = None
    domain: Optional[str] = None
    search: Optional[str] = None

    def to_query(self) -> Dict[str, str]:
        query = self.pagination.to_query()
        if self.organization_id is not None:
            query["organization_id"] = self.organization_id
        if self.directory_type is not None:
            query["directory_type"] = encode_known_or_unknown(known_or_unknown(DirectoryType, self.directory_type))
        if self.domain is not None:
            query["domain"] = self.domain
        if self.search is not None:
            query["search"] = self.search
        return query


@dataclass(frozen=True)
class DirectoryUsersFilter:
    """Scope of a directory user listing: a whole directory or one group."""

    key: str
    value: str

    @classmethod
    def directory(cls, directory_id: DirectoryId) -> "DirectoryUsersFilter":
        return cls("directory", directory_id)

    @classmethod
    def group(cls, group_id: DirectoryGroupId) -> "DirectoryUsersFilter":
        return cls("group", group_id)


@dataclass(frozen=True)
class DirectoryGroupsFilter:
    """Scope of a directory group listing: a whole directory or the groups of one user."""

    key: str
    value: str

    @classmethod
    def directory(cls, directory_id: DirectoryId) -> "DirectoryGroupsFilter":
        return cls("directory", directory_id)

    @classmethod
    def user(cls, user_id: DirectoryUserId) -> "DirectoryGroupsFilter":
        return cls("user", user_id)


@dataclass(frozen=True)
class ListDirectoryUsersParams:
    filter: DirectoryUsersFilter
    pagination: PaginationParams = field(default_factory=PaginationParams)

    def to_query(self) -> Dict[str, str]:
        query = self.pagination.to_query()
        query[self.filter.key] = self.filter.value
        return query


@dataclass(frozen=True)
class ListDirectoryGroupsParams:
    filter: DirectoryGroupsFilter
    pagination: PaginationParams = field(default_factory=PaginationParams)

    def to_query(self) -> Dict[str, str]:
        query = self.pagination.to_query()
        query[self.filter.key] = self.filter.value
        return query


__all__ = [
    "DirectoryType",
    "DirectoryState",
    "DirectoryUserState",
    "Directory",
    "DirectoryUser",
    "DirectoryUserEmail",
    "DirectoryGroup",
    "ListDirectoriesParams",
    "DirectoryUsersFilter",
    "DirectoryGroupsFilter",
    "ListDirectoryUsersParams",
    "ListDirectoryGroupsParams",
]
