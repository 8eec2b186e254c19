# Licensed under the MIT license.

from __future__ import annotations

import os
from typing import Optional

import requests

from .core.config import WorkOSConfig
from .data._api import _ApiClient
from .operations.admin_portal import AdminPortalOperations
from .operations.directory_sync import DirectorySyncOperations
from .operations.mfa import MfaOperations
from .operations.organizations import OrganizationOperations
from .operations.passwordless import PasswordlessOperations
from .operations.sso import SsoOperations
from .operations.user_management import UserManagementOperations
from .operations.webhooks import WebhookOperations


class WorkOSClient:
    """
    High-level client for the WorkOS API.

    Every operation returns a result envelope instead of raising; see
    :mod:`workos_sdk.core.results`. The client holds only its API key,
    configuration and HTTP session, all set up at construction, so one
    instance can be shared between threads. Entering and closing the
    client swap its HTTP session and should happen outside concurrent use.
    Create one client per API key when serving several tenants.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling and
        releases the pooled connections on exit::

            with WorkOSClient("sk_example_123456789") as client:
                result = client.organizations.get_organization("org_123")
            # Resources automatically cleaned up

    **Without Context Manager**:
        Each request opens its own connection. Call ``close()`` when done::

            client = WorkOSClient("sk_example_123456789")
            try:
                result = client.sso.get_connection("conn_123")
            finally:
                client.close()

    Operations are organized under namespaces:

    - ``client.organizations``: organization CRUD
    - ``client.sso``: authorization URLs, code exchange, profiles, connections
    - ``client.directory_sync``: directories, directory users and groups
    - ``client.mfa``: factor enrollment, challenges and verification
    - ``client.passwordless``: Magic Link sessions
    - ``client.user_management``: users and code authentication
    - ``client.admin_portal``: Admin Portal links
    - ``client.webhooks``: signature verification and payload parsing

    :param api_key: Secret API key. If omitted, ``WORKOS_API_KEY`` is used.
    :type api_key: :class:`str` | None
    :param config: Optional configuration for base URL, user agent, timeouts and retries.
        If not provided, it is loaded from :meth:`~workos_sdk.core.config.WorkOSConfig.from_env`.
    :type config: ~workos_sdk.core.config.WorkOSConfig | None
    :param session: Optional caller-owned :class:`requests.Session` to send requests
        through. The client never closes a session it did not create.
    :type session: :class:`requests.Session` | None

    :raises ValueError: If no API key is available or the base URL is empty.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[WorkOSConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key or os.environ.get("WORKOS_API_KEY") or ""
        if not self._api_key:
            raise ValueError("api_key is required (pass it or set WORKOS_API_KEY).")
        self._config = config or WorkOSConfig.from_env()
        if not (self._config.base_url or "").strip():
            raise ValueError("base_url is required.")
        self._session: Optional[requests.Session] = session
        self._owns_session: bool = False
        self._api: _ApiClient = self._new_api()

        # Initialize operation namespaces
        self.organizations = OrganizationOperations(self)
        self.sso = SsoOperations(self)
        self.directory_sync = DirectorySyncOperations(self)
        self.mfa = MfaOperations(self)
        self.passwordless = PasswordlessOperations(self)
        self.user_management = UserManagementOperations(self)
        self.admin_portal = AdminPortalOperations(self)
        self.webhooks = WebhookOperations(self)

    @property
    def config(self) -> WorkOSConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def __enter__(self) -> "WorkOSClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling unless one was supplied.

        :return: The client instance.
        :rtype: WorkOSClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Rebuild so requests go through the new session
            self._api = self._new_api()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit the context manager with cleanup.

        :return: None (exceptions are not suppressed).
        """
        self.close()

    def close(self) -> None:
        """
        Explicitly close the client and release resources.

        Closes the HTTP session if the client created it. Safe to call multiple times.
        """
        if self._owns_session:
            self._api.close()
            if self._session is not None:
                self._session.close()
            self._session = None
            self._owns_session = False
            self._api = self._new_api()

    def _new_api(self) -> _ApiClient:
        return _ApiClient(self._api_key, self._config, session=self._session)

    def _get_api(self) -> _ApiClient:
        """
        Get the internal API client instance.

        :return: The low-level client used to perform HTTP requests, bound to the current session.
        :rtype: ~workos_sdk.data._api._ApiClient
        """
        return self._api


__all__ = ["WorkOSClient"]
