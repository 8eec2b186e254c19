# Licensed under the MIT license.

"""User Management operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..core.results import WorkOSResult
from ..core.types import UserId
from ..models.oauth import OAuthError, decode_oauth_error
from ..models.user_management import (
    AuthenticateWithCodeParams,
    AuthenticateWithCodeResponse,
    GetUserError,
    User,
)

if TYPE_CHECKING:
    from ..client import WorkOSClient


def _decode_not_found(response: Any) -> GetUserError:
    return GetUserError.not_found(response.text or "")


class UserManagementOperations:
    """
    User Management operations.

    Accessed via ``client.user_management``.

    Example::

        result = client.user_management.get_user("user_123")
        if isinstance(result, OperationError):
            print("no such user")
    """

    def __init__(self, client: "WorkOSClient") -> None:
        self._client = client

    def get_user(self, user_id: UserId) -> WorkOSResult[User, GetUserError]:
        """
        Get a user by ID.

        HTTP 404 is an :class:`~workos_sdk.core.results.OperationError` whose
        ``error`` is ``"not_found"`` and whose description is the response body.

        :param user_id: User identifier.
        :type user_id: str
        :rtype: WorkOSResult[User, GetUserError]
        """
        return self._client._get_api()._call(
            "get",
            ("user_management", "users", user_id),
            decode=User.from_api_response,
            error_statuses=(404,),
            decode_error=_decode_not_found,
        )

    def authenticate_with_code(
        self, params: AuthenticateWithCodeParams
    ) -> WorkOSResult[AuthenticateWithCodeResponse, OAuthError]:
        """
        Exchange an authorization code for the signed-in user.

        OAuth errors on HTTP 400 map as in
        :meth:`~workos_sdk.operations.sso.SsoOperations.get_profile_and_token`.

        :param params: Client ID, code, and the browser's IP address and user agent.
        :type params: ~workos_sdk.models.user_management.AuthenticateWithCodeParams
        :rtype: WorkOSResult[AuthenticateWithCodeResponse, OAuthError]
        """
        api = self._client._get_api()
        form = {
            "client_id": params.client_id,
            "client_secret": api.api_key,
            "grant_type": "authorization_code",
            "code": params.code,
        }
        if params.ip_address is not None:
            form["ip_address"] = params.ip_address
        if params.user_agent is not None:
            form["user_agent"] = params.user_agent
        return api._call(
            "post",
            ("user_management", "authenticate"),
            data=form,
            decode=AuthenticateWithCodeResponse.from_api_response,
            error_statuses=(400,),
            decode_error=decode_oauth_error,
        )
