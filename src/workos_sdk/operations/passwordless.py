# Licensed under the MIT license.

"""Passwordless session operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.results import NoError, WorkOSResult
from ..core.types import PasswordlessSessionId
from ..models.passwordless import CreatePasswordlessSessionParams, PasswordlessSession

if TYPE_CHECKING:
    from ..client import WorkOSClient


class PasswordlessOperations:
    """
    Magic Link operations.

    Accessed via ``client.passwordless``.

    Example::

        session = client.passwordless.create_passwordless_session(
            CreatePasswordlessSessionParams(email="marcelina@foo-corp.com")
        ).unwrap()
        client.passwordless.send_passwordless_session(session.id)
    """

    def __init__(self, client: "WorkOSClient") -> None:
        self._client = client

    def create_passwordless_session(
        self, params: CreatePasswordlessSessionParams
    ) -> WorkOSResult[PasswordlessSession, NoError]:
        """
        Create a Magic Link session.

        :param params: Email address, optional redirect URI and state.
        :type params: ~workos_sdk.models.passwordless.CreatePasswordlessSessionParams
        :return: The session, including the link.
        :rtype: WorkOSResult[PasswordlessSession, NoError]
        """
        return self._client._get_api()._call(
            "post",
            ("passwordless", "sessions"),
            json=params.to_body(),
            decode=PasswordlessSession.from_api_response,
        )

    def send_passwordless_session(self, session_id: PasswordlessSessionId) -> WorkOSResult[None, NoError]:
        """
        Email the Magic Link of a session to its address.

        :param session_id: Session identifier.
        :type session_id: str
        :return: ``Ok(None)`` once the email is queued.
        :rtype: WorkOSResult[None, NoError]
        """
        return self._client._get_api()._call(
            "post", ("passwordless", "sessions", session_id, "send"), json={}, decode=None
        )
