# Licensed under the MIT license.

"""
Single Sign-On models: connections, profiles, and authorization URL parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from ..core.known_or_unknown import (
    KnownOrUnknown,
    decode_known_or_unknown,
    encode_known_or_unknown,
    known_or_unknown,
)
from ..core.pagination import PaginationParams
from ..core.types import (
    AccessToken,
    AuthorizationCode,
    ClientId,
    ConnectionId,
    OrganizationId,
    ProfileId,
    RawAttributes,
    Timestamps,
    optional_str,
    raw_attributes,
    require_str,
)


class ConnectionType(str, Enum):
    """
    Identity provider type of a connection.

    Values are the server's documented tokens, whose casing is irregular
    (``"GoogleOAuth"``, ``"ADFSSAML"``) and must match exactly.
    """

    ADFS_SAML = "ADFSSAML"
    ADP_OIDC = "ADPOIDC"
    AUTH0_SAML = "Auth0SAML"
    AZURE_SAML = "AzureSAML"
    CAS_SAML = "CASSAML"
    CLASS_LINK_SAML = "ClassLinkSAML"
    CLOUDFLARE_SAML = "CloudflareSAML"
    CYBER_ARK_SAML = "CyberArkSAML"
    DUO_SAML = "DuoSAML"
    GENERIC_OIDC = "GenericOIDC"
    GENERIC_SAML = "GenericSAML"
    GOOGLE_OAUTH = "GoogleOAuth"
    GOOGLE_SAML = "GoogleSAML"
    JUMP_CLOUD_SAML = "JumpCloudSAML"
    KEYCLOAK_SAML = "KeycloakSAML"
    MICROSOFT_OAUTH = "MicrosoftOAuth"
    MINI_ORANGE_SAML = "MiniOrangeSAML"
    NET_IQ_SAML = "NetIqSAML"
    OKTA_SAML = "OktaSAML"
    ONE_LOGIN_SAML = "OneLoginSAML"
    ORACLE_SAML = "OracleSAML"
    PING_FEDERATE_SAML = "PingFederateSAML"
    PING_ONE_SAML = "PingOneSAML"
    SALESFORCE_SAML = "SalesforceSAML"
    SHIBBOLETH_SAML = "ShibbolethSAML"
    SIMPLE_SAML_PHP_SAML = "SimpleSamlPhpSAML"
    VMWARE_SAML = "VMwareSAML"


class ConnectionState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Provider(str, Enum):
    """OAuth providers that can be selected directly when building an authorization URL."""

    GOOGLE_OAUTH = "GoogleOAuth"
    MICROSOFT_OAUTH = "MicrosoftOAuth"


@dataclass(frozen=True)
class Connection:
    """
    An SSO connection between an organization and an identity provider.

    :param id: Connection identifier.
    :type id: str
    :param organization_id: Owning organization, if any.
    :type organization_id: str | None
    :param connection_type: Identity provider type.
    :type connection_type: Known[ConnectionType] | Unknown
    :param name: Display name.
    :type name: str
    :param state: Whether the connection is active.
    :type state: Known[ConnectionState] | Unknown
    :param timestamps: Creation and update times, when the server includes them.
    :type timestamps: ~workos_sdk.core.types.Timestamps | None
    """

    id: ConnectionId
    organization_id: Optional[OrganizationId]
    connection_type: KnownOrUnknown[ConnectionType]
    name: str
    state: KnownOrUnknown[ConnectionState]
    timestamps: Optional[Timestamps] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Connection":
        organization_id = optional_str(data.get("organization_id"), "organization_id")
        has_timestamps = "created_at" in data and "updated_at" in data
        return cls(
            id=ConnectionId(require_str(data["id"], "id")),
            organization_id=OrganizationId(organization_id) if organization_id is not None else None,
            connection_type=decode_known_or_unknown(ConnectionType, data["connection_type"]),
            name=require_str(data["name"], "name"),
            state=decode_known_or_unknown(ConnectionState, data["state"]),
            timestamps=Timestamps.from_api_response(data) if has_timestamps else None,
        )


@dataclass(frozen=True)
class Profile:
    """
    A user profile returned by an identity provider after SSO.

    :param id: Profile identifier.
    :param connection_id: Connection the user signed in through.
    :param connection_type: Identity provider type of that connection.
    :param organization_id: Organization of the connection, if any.
    :param idp_id: User identifier assigned by the identity provider.
    :param email: Email address.
    :param first_name: Given name, if provided.
    :param last_name: Family name, if provided.
    :param raw_attributes: Attributes exactly as the identity provider sent them.
    """

    id: ProfileId
    connection_id: ConnectionId
    connection_type: KnownOrUnknown[ConnectionType]
    organization_id: Optional[OrganizationId]
    idp_id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    raw_attributes: RawAttributes = field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Profile":
        organization_id = optional_str(data.get("organization_id"), "organization_id")
        return cls(
            id=ProfileId(require_str(data["id"], "id")),
            connection_id=ConnectionId(require_str(data["connection_id"], "connection_id")),
            connection_type=decode_known_or_unknown(ConnectionType, data["connection_type"]),
            organization_id=OrganizationId(organization_id) if organization_id is not None else None,
            idp_id=require_str(data["idp_id"], "idp_id"),
            email=require_str(data["email"], "email"),
            first_name=optional_str(data.get("first_name"), "first_name"),
            last_name=optional_str(data.get("last_name"), "last_name"),
            raw_attributes=raw_attributes(data.get("raw_attributes")),
        )


@dataclass(frozen=True)
class ProfileAndToken:
    """Result of exchanging an authorization code: an access token and the user's profile."""

    access_token: AccessToken
    profile: Profile

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "ProfileAndToken":
        return cls(
            access_token=AccessToken(require_str(data["access_token"], "access_token")),
            profile=Profile.from_api_response(data["profile"]),
        )


@dataclass(frozen=True)
class ConnectionSelector:
    """
    Selects which connection an authorization URL targets.

    Build with :meth:`connection`, :meth:`organization` or :meth:`provider`::

        ConnectionSelector.organization("org_123")
        ConnectionSelector.provider(Provider.GOOGLE_OAUTH)
    """

    key: str
    value: str

    @classmethod
    def connection(cls, connection_id: ConnectionId) -> "ConnectionSelector":
        return cls("connection", connection_id)

    @classmethod
    def organization(cls, organization_id: OrganizationId) -> "ConnectionSelector":
        return cls("organization", organization_id)

    @classmethod
    def provider(cls, provider: Provider) -> "ConnectionSelector":
        return cls("provider", Provider(provider).value)

    def as_query_param(self) -> Tuple[str, str]:
        return self.key, self.value


@dataclass(frozen=True)
class GetAuthorizationUrlParams:
    """
    Parameters for building an SSO authorization URL.

    :param client_id: WorkOS client ID of the application.
    :param redirect_uri: Where WorkOS redirects with the authorization code.
    :param connection_selector: Connection, organization, or provider to authenticate against.
    :param state: Opaque value echoed back on the redirect.
    """

    client_id: ClientId
    redirect_uri: str
    connection_selector: ConnectionSelector
    state: Optional[str] = None


@dataclass(frozen=True)
class GetProfileAndTokenParams:
    """
    :param client_id: WorkOS client ID of the application.
    :param code: Authorization code from the redirect.
    """

    client_id: ClientId
    code: AuthorizationCode


@dataclass(frozen=True)
class ListConnectionsParams:
    """
    Parameters for listing connections.

    :param pagination: Cursor parameters.
    :param organization_id: Only connections of this organization.
    :param connection_type: Only connections of this type; an enum member,
        a raw token, or a decoded value.
    """

    pagination: PaginationParams = field(default_factory=PaginationParams)
    organization_id: Optional[OrganizationId] = None
    connection_type: Optional[Union[ConnectionType, str, KnownOrUnknown[ConnectionType]]] = None

    def to_query(self) -> Dict[str, str]:
        query = self.pagination.to_query()
        if self.organization_id is not None:
            query["organization_id"] = self.organization_id
        if self.connection_type is not None:
            query["connection_type"] = encode_known_or_unknown(known_or_unknown(ConnectionType, self.connection_type))
        return query


__all__ = [
    "ConnectionType",
    "ConnectionState",
    "Provider",
    "Connection",
    "Profile",
    "ProfileAndToken",
    "ConnectionSelector",
    "GetAuthorizationUrlParams",
    "GetProfileAndTokenParams",
    "ListConnectionsParams",
]
