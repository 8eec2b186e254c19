# Licensed under the MIT license.

"""
Shared mapping from an HTTP response to a result envelope.

Every operation funnels its response through :func:`map_response`, which
applies one policy in a fixed order:

1. HTTP 401 is :class:`~workos_sdk.core.results.Unauthorized`, whatever the body.
2. A 2xx response is decoded into the success type; a decode failure is a
   :class:`~workos_sdk.core.results.TransportError`.
3. A status the operation lists in ``error_statuses`` is handed to its error
   decoder, which yields an operation error, :data:`UNAUTHORIZED`, or ``None``
   when the body is not one it recognizes.
4. Everything else is a :class:`~workos_sdk.core.results.TransportError`.

Failures to build or send the request are handled by the caller, before a
response exists.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Collection, Optional

from .results import Ok, OperationError, TransportError, Unauthorized, WorkOSResult

logger = logging.getLogger(__name__)

_BODY_EXCERPT_LIMIT = 200

# Exceptions that signal a response body did not match the expected shape.
DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


class _UnauthorizedMarker:
    def __repr__(self) -> str:
        return "UNAUTHORIZED"


# Returned by an error decoder to remap a recognized error body to Unauthorized.
UNAUTHORIZED = _UnauthorizedMarker()


def body_excerpt(response: Any) -> Optional[str]:
    """Return the first characters of the response body, or ``None`` if unavailable."""
    text = getattr(response, "text", None)
    if not text:
        return None
    return text[:_BODY_EXCERPT_LIMIT]


def map_response(
    response: Any,
    decode: Optional[Callable[[Any], Any]],
    *,
    error_statuses: Collection[int] = (),
    decode_error: Optional[Callable[[Any], Any]] = None,
) -> WorkOSResult[Any, Any]:
    """
    Map a response to a result envelope.

    :param response: Response exposing ``status_code``, ``text`` and ``json()``.
    :param decode: Decoder applied to the parsed JSON of a 2xx body. ``None``
        means the body is ignored and the success value is ``None``.
    :param error_statuses: Statuses the operation recognizes as operation failures.
    :param decode_error: Called with the response for a status in ``error_statuses``.
        Returns the typed error, :data:`UNAUTHORIZED`, or ``None`` if unrecognized.
    :return: One of the four envelope variants.
    """
    status = response.status_code

    if status == 401:
        return Unauthorized()

    if 200 <= status < 300:
        if decode is None:
            return Ok(None)
        try:
            value = decode(response.json())
        except DECODE_ERRORS as exc:
            logger.debug("Failed to decode HTTP %s response: %s", status, exc)
            return TransportError(
                f"Unexpected response body for HTTP {status}: {exc}",
                status_code=status,
                body=body_excerpt(response),
                cause=exc,
            )
        return Ok(value)

    if status in error_statuses and decode_error is not None:
        try:
            error = decode_error(response)
        except DECODE_ERRORS as exc:
            logger.debug("Failed to decode HTTP %s error body: %s", status, exc)
            return TransportError(
                f"Unexpected error body for HTTP {status}: {exc}",
                status_code=status,
                body=body_excerpt(response),
                cause=exc,
            )
        if error is UNAUTHORIZED:
            return Unauthorized()
        if error is not None:
            return OperationError(error)

    return TransportError(
        f"Unexpected HTTP status {status}",
        status_code=status,
        body=body_excerpt(response),
    )


__all__ = ["map_response", "UNAUTHORIZED", "DECODE_ERRORS", "body_excerpt"]
