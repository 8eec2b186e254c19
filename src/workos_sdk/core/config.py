# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://api.workos.com"


def _default_user_agent() -> str:
    from .. import __version__

    return f"workos-sdk-python/{__version__}"


@dataclass(frozen=True)
class WorkOSConfig:
    """
    Configuration settings for WorkOS client operations.

    :param base_url: API origin. Default is ``https://api.workos.com``.
    :type base_url: str
    :param user_agent: ``User-Agent`` header sent with every request.
        Default is ``workos-sdk-python/<version>``.
    :type user_agent: str or None
    :param http_retries: Number of retries after a network error (default: 0, no retries).
    :type http_retries: int or None
    :param http_backoff: Base delay in seconds for exponential backoff between retries (default: 0.5).
    :type http_backoff: float or None
    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: Optional[str] = None

    # HTTP transport configuration
    http_retries: Optional[int] = None
    http_backoff: Optional[float] = None
    http_timeout: Optional[float] = None

    @property
    def effective_user_agent(self) -> str:
        return self.user_agent or _default_user_agent()

    @classmethod
    def from_env(cls) -> "WorkOSConfig":
        """
        Create a configuration instance from ``WORKOS_*`` environment variables.

        Reads ``WORKOS_BASE_URL``, ``WORKOS_USER_AGENT`` and ``WORKOS_HTTP_TIMEOUT``;
        unset variables keep their defaults.

        :return: Configuration instance.
        :rtype: ~workos_sdk.core.config.WorkOSConfig
        :raises ValueError: If ``WORKOS_HTTP_TIMEOUT`` is not a number.
        """
        timeout = os.environ.get("WORKOS_HTTP_TIMEOUT")
        return cls(
            base_url=os.environ.get("WORKOS_BASE_URL") or DEFAULT_BASE_URL,
            user_agent=os.environ.get("WORKOS_USER_AGENT") or None,
            http_retries=None,  # Will default to 0 in _HttpClient
            http_backoff=None,  # Will default to 0.5 in _HttpClient
            http_timeout=float(timeout) if timeout else None,
        )
