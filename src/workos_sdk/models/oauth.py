# Licensed under the MIT license.

"""OAuth-style error body shared by the code exchange operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..core._error_codes import OAUTH_CLIENT_IDENTITY_ERRORS, OAUTH_INVALID_GRANT
from ..core._response import UNAUTHORIZED
from ..core.types import require_str


@dataclass(frozen=True)
class OAuthError:
    """
    ``{"error": ..., "error_description": ...}`` returned with HTTP 400 by token exchanges.

    :param error: OAuth error code, e.g. ``"invalid_grant"``.
    :type error: str
    :param error_description: Human readable description.
    :type error_description: str
    """

    error: str
    error_description: str

    @property
    def is_invalid_grant(self) -> bool:
        """True when the authorization code was invalid, expired, or already used."""
        return self.error == OAUTH_INVALID_GRANT

    def __str__(self) -> str:
        return f"{self.error}: {self.error_description}"

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "OAuthError":
        return cls(
            error=require_str(data["error"], "error"),
            error_description=require_str(data["error_description"], "error_description"),
        )


def decode_oauth_error(response: Any) -> Optional[Union[OAuthError, object]]:
    """
    Error decoder for HTTP 400 from a token exchange.

    ``invalid_client`` and ``unauthorized_client`` reject the client identity and map
    to ``Unauthorized``; any other code is an :class:`OAuthError` operation error.
    """
    error = OAuthError.from_api_response(response.json())
    if error.error in OAUTH_CLIENT_IDENTITY_ERRORS:
        return UNAUTHORIZED
    return error


__all__ = ["OAuthError", "decode_oauth_error"]
