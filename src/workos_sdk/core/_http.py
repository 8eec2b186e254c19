# Licensed under the MIT license.

"""
Request sender used by :class:`~workos_sdk.data._api._ApiClient`.

Each WorkOS call is sent once. Retrying is opt-in through
``WorkOSConfig.http_retries`` and covers connection-level failures only: an
HTTP status, whatever its value, is handed back to the caller for mapping.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

# Seconds.
_READ_TIMEOUT = 10
_WRITE_TIMEOUT = 60
_WRITE_METHODS = frozenset({"post", "put", "delete"})


class _HttpClient:
    """
    Sends WorkOS API requests through :mod:`requests`.

    :param retries: Extra attempts after a connection-level failure. ``None`` or 0
        means one attempt and no retry.
    :type retries: :class:`int` | None
    :param backoff: First retry delay in seconds, doubled for each further retry. Default 0.5.
    :type backoff: :class:`float` | None
    :param timeout: Timeout applied to every request. ``None`` keeps the split
        between reads (10s) and writes (60s).
    :type timeout: :class:`float` | None
    :param session: Pooled session owned by the caller; when absent each request
        goes through :func:`requests.request`.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        backoff: Optional[float] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.max_attempts = 1 + max(retries or 0, 0)
        self.base_delay = 0.5 if backoff is None else backoff
        self.default_timeout: Optional[float] = timeout
        self._session = session

    def _timeout_for(self, method: str) -> float:
        if self.default_timeout is not None:
            return self.default_timeout
        return _WRITE_TIMEOUT if (method or "").lower() in _WRITE_METHODS else _READ_TIMEOUT

    def _dispatch(self, method: str, url: str, headers: Optional[Dict[str, str]], kwargs: Dict[str, Any]):
        sender = self._session.request if self._session is not None else requests.request
        return sender(method, url, headers=headers, **kwargs)

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """
        Send a request and return whatever response comes back.

        Non-2xx responses are returned as-is for
        :func:`~workos_sdk.core._response.map_response`.

        :param method: HTTP verb, e.g. ``"get"`` or ``"post"``.
        :type method: :class:`str`
        :param url: Absolute URL under the configured base URL.
        :type url: :class:`str`
        :param headers: Auth, user agent and accept headers.
        :type headers: :class:`dict` | None
        :param kwargs: Forwarded to :mod:`requests`: ``params``, ``json``, ``data``
            and optionally ``timeout``.
        :return: The response.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: When the last allowed attempt
            fails to get a response.
        """
        kwargs.setdefault("timeout", self._timeout_for(method))
        attempt = 0
        while True:
            try:
                return self._dispatch(method, url, headers, kwargs)
            except requests.exceptions.RequestException as exc:
                attempt += 1
                if attempt >= self.max_attempts:
                    raise
                delay = self.base_delay * (2 ** (attempt - 1))
                logger.debug("%s %s: %s (attempt %d of %d), next try in %.2fs",
                             method.upper(), url, exc, attempt, self.max_attempts, delay)
                time.sleep(delay)

    def close(self) -> None:
        """Close the session, if any. Calling it again does nothing."""
        if self._session is not None:
            self._session.close()
            self._session = None
