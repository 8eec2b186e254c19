# Licensed under the MIT license.

"""Single Sign-On operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from urllib.parse import urlencode

from ..core.pagination import PaginatedList
from ..core.results import NoError, WorkOSResult
from ..core.types import AccessToken, ConnectionId
from ..models.oauth import OAuthError, decode_oauth_error
from ..models.sso import (
    Connection,
    GetAuthorizationUrlParams,
    GetProfileAndTokenParams,
    ListConnectionsParams,
    Profile,
    ProfileAndToken,
)

if TYPE_CHECKING:
    from ..client import WorkOSClient


def _decode_page(body) -> PaginatedList[Connection]:
    return PaginatedList.from_api_response(body, Connection.from_api_response)


class SsoOperations:
    """
    Single Sign-On operations.

    Accessed via ``client.sso``.

    Example:
        Sign a user in::

            url = client.sso.get_authorization_url(
                GetAuthorizationUrlParams(
                    client_id="client_123",
                    redirect_uri="https://your-app.com/callback",
                    connection_selector=ConnectionSelector.organization("org_123"),
                )
            )
            # ... redirect the browser to url, receive ?code=... on the callback

            result = client.sso.get_profile_and_token(
                GetProfileAndTokenParams(client_id="client_123", code=code)
            )
            if isinstance(result, OperationError) and result.error.is_invalid_grant:
                ...  # code expired or reused
    """

    def __init__(self, client: "WorkOSClient") -> None:
        """
        Initialize SsoOperations.

        :param client: Parent WorkOSClient instance.
        :type client: WorkOSClient
        """
        self._client = client

    def get_authorization_url(self, params: GetAuthorizationUrlParams) -> str:
        """
        Build the URL that starts an SSO sign-in. No request is made.

        :param params: Client, redirect URI, connection selector and optional state.
        :type params: ~workos_sdk.models.sso.GetAuthorizationUrlParams
        :return: Absolute ``/sso/authorize`` URL.
        :rtype: str
        :raises ValueError: If the configured base URL is not an absolute http(s) URL.
        """
        key, value = params.connection_selector.as_query_param()
        query = [
            ("response_type", "code"),
            ("client_id", params.client_id),
            ("redirect_uri", params.redirect_uri),
            (key, value),
        ]
        if params.state is not None:
            query.append(("state", params.state))
        return f"{self._client._get_api()._url('sso', 'authorize')}?{urlencode(query)}"

    def get_profile_and_token(self, params: GetProfileAndTokenParams) -> WorkOSResult[ProfileAndToken, OAuthError]:
        """
        Exchange an authorization code for an access token and the user's profile.

        HTTP 400 with ``invalid_client`` or ``unauthorized_client`` is
        :class:`~workos_sdk.core.results.Unauthorized`; any other OAuth error code
        (e.g. ``invalid_grant``) is an :class:`~workos_sdk.core.results.OperationError`.

        :param params: Client ID and authorization code.
        :type params: ~workos_sdk.models.sso.GetProfileAndTokenParams
        :return: Access token and profile.
        :rtype: WorkOSResult[ProfileAndToken, OAuthError]
        """
        api = self._client._get_api()
        form = {
            "client_id": params.client_id,
            "client_secret": api.api_key,
            "grant_type": "authorization_code",
            "code": params.code,
        }
        return api._call(
            "post",
            ("sso", "token"),
            data=form,
            decode=ProfileAndToken.from_api_response,
            error_statuses=(400,),
            decode_error=decode_oauth_error,
        )

    def get_profile(self, access_token: AccessToken) -> WorkOSResult[Profile, NoError]:
        """
        Get the profile of a signed-in user.

        Authenticates with ``access_token`` instead of the API key.

        :param access_token: Token from :meth:`get_profile_and_token`.
        :type access_token: str
        :return: The user's profile.
        :rtype: WorkOSResult[Profile, NoError]
        """
        return self._client._get_api()._call(
            "get", ("sso", "profile"), bearer=access_token, decode=Profile.from_api_response
        )

    def get_connection(self, connection_id: ConnectionId) -> WorkOSResult[Connection, NoError]:
        """
        Get a connection by ID.

        :param connection_id: Connection identifier.
        :type connection_id: str
        :rtype: WorkOSResult[Connection, NoError]
        """
        return self._client._get_api()._call(
            "get", ("connections", connection_id), decode=Connection.from_api_response
        )

    def list_connections(
        self, params: Optional[ListConnectionsParams] = None
    ) -> WorkOSResult[PaginatedList[Connection], NoError]:
        """
        List connections, optionally filtered by organization or type.

        :param params: Filters and cursors.
        :type params: ~workos_sdk.models.sso.ListConnectionsParams | None
        :rtype: WorkOSResult[PaginatedList[Connection], NoError]
        """
        params = params or ListConnectionsParams()
        return self._client._get_api()._call(
            "get", ("connections",), params=params.to_query(), decode=_decode_page
        )

    def delete_connection(self, connection_id: ConnectionId) -> WorkOSResult[None, NoError]:
        """
        Delete a connection.

        :param connection_id: Connection identifier.
        :type connection_id: str
        :rtype: WorkOSResult[None, NoError]
        """
        return self._client._get_api()._call("delete", ("connections", connection_id), decode=None)
