# Licensed under the MIT license.

"""Low-level WorkOS API client: URL building, auth headers, request dispatch."""

from __future__ import annotations

import logging
from typing import Any, Callable, Collection, Dict, Mapping, Optional
from urllib.parse import quote, urlsplit

import requests

from ..core._http import _HttpClient
from ..core._response import map_response
from ..core.config import WorkOSConfig
from ..core.results import TransportError, WorkOSResult

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Percent-encode a single path segment, including ``/``."""
    return quote(str(value), safe="")


class _ApiClient:
    """
    Issues authenticated requests against the WorkOS API and maps responses to result envelopes.

    :param api_key: Secret API key sent as a bearer credential.
    :type api_key: :class:`str`
    :param config: Client configuration.
    :type config: ~workos_sdk.core.config.WorkOSConfig
    :param session: Optional session for connection pooling.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        api_key: str,
        config: WorkOSConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key
        self.config = config
        self.base_url = (config.base_url or "").rstrip("/")
        self._http = _HttpClient(
            retries=config.http_retries,
            backoff=config.http_backoff,
            timeout=config.http_timeout,
            session=session,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    def _url(self, *segments: str) -> str:
        """
        Build an absolute URL from path segments.

        Literal segments (``"organizations"``) and identifiers are both percent-encoded,
        so an identifier can never escape its path position.

        :raises ValueError: If the configured base URL is not an absolute http(s) URL.
        """
        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"Invalid base URL: {self.base_url!r}")
        return self.base_url + "/" + "/".join(_segment(s) for s in segments)

    def _headers(self, bearer: Optional[str] = None) -> Dict[str, str]:
        """Build standard headers. ``bearer`` overrides the API key (e.g. an SSO access token)."""
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.effective_user_agent,
        }
        token = self._api_key if bearer is None else bearer
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _call(
        self,
        method: str,
        segments: Collection[str],
        *,
        decode: Optional[Callable[[Any], Any]],
        params: Optional[Mapping[str, str]] = None,
        json: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, str]] = None,
        bearer: Optional[str] = None,
        error_statuses: Collection[int] = (),
        decode_error: Optional[Callable[[Any], Any]] = None,
    ) -> WorkOSResult[Any, Any]:
        """
        Send one request and map the response.

        URL building and transport failures become :class:`~workos_sdk.core.results.TransportError`;
        responses go through :func:`~workos_sdk.core._response.map_response`.

        :param method: HTTP method.
        :param segments: Path segments under the base URL.
        :param decode: Success body decoder, or ``None`` to ignore the body.
        :param params: Query parameters.
        :param json: JSON request body.
        :param data: Form-encoded request body.
        :param bearer: Bearer token to send instead of the API key.
        :param error_statuses: Statuses routed to ``decode_error``.
        :param decode_error: Operation-specific error decoder.
        :return: Result envelope.
        """
        path = "/" + "/".join(segments)
        try:
            url = self._url(*segments)
            kwargs: Dict[str, Any] = {}
            if params:
                kwargs["params"] = dict(params)
            if json is not None:
                kwargs["json"] = dict(json)
            if data is not None:
                kwargs["data"] = dict(data)
            response = self._http.send(method, url, headers=self._headers(bearer), **kwargs)
        except (requests.exceptions.RequestException, ValueError, TypeError) as exc:
            logger.debug("%s %s could not be sent: %s", method.upper(), path, exc)
            return TransportError(f"Request failed: {exc}", cause=exc)

        logger.debug("%s %s -> %s", method.upper(), path, response.status_code)
        result = map_response(response, decode, error_statuses=error_statuses, decode_error=decode_error)
        if not result.is_ok:
            logger.debug("%s %s returned %s", method.upper(), path, type(result).__name__)
        return result

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()
