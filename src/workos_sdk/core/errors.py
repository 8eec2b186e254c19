# Licensed under the MIT license.

"""
Structured exceptions for the WorkOS SDK.

Remote operations never raise these; they return a result envelope. The
exceptions are raised when a caller opts into exception-style handling via
``result.unwrap()``, and by local helpers such as webhook signature
verification.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

from ._error_codes import (
    OPERATION_ERROR,
    TRANSPORT_ERROR,
    UNAUTHORIZED,
    WEBHOOK_SIGNATURE_ERROR,
    HTTP_401,
    http_subcode,
)


class WorkOSError(Exception):
    """
    Base structured error for the WorkOS SDK.

    :param message: Human readable error message.
    :type message: :class:`str`
    :param code: Error category, one of the constants in ``_error_codes``.
    :type code: :class:`str`
    :param subcode: Optional finer-grained code (e.g. ``"http_422"``).
    :type subcode: :class:`str` | None
    :param status_code: HTTP status of the failing response, if any.
    :type status_code: :class:`int` | None
    :param details: Additional diagnostic data.
    :type details: :class:`dict` | None
    :param source: ``"client"`` or ``"server"``.
    :type source: :class:`str` | None
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class UnauthorizedError(WorkOSError):
    """The API key or client identity was rejected by the server."""

    def __init__(self, message: str = "The credential was rejected by the WorkOS API.") -> None:
        super().__init__(message, code=UNAUTHORIZED, subcode=HTTP_401, status_code=401, source="server")


class OperationFailedError(WorkOSError):
    """
    The server rejected the request with a failure the operation recognizes.

    :param error: The typed operation error value (e.g. an ``EnrollFactorError``).
    """

    def __init__(self, error: Any) -> None:
        message = getattr(error, "message", None) or getattr(error, "error_description", None) or str(error)
        super().__init__(message, code=OPERATION_ERROR, details={"error": error}, source="server")
        self.error = error


class TransportFailureError(WorkOSError):
    """
    The request could not be completed or the response did not match its expected shape.

    :param message: Description of the failure.
    :param status_code: HTTP status, when a response was received.
    :param body_excerpt: Leading part of the response body, when available.
    :param cause: Underlying exception, when available.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body_excerpt: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if body_excerpt is not None:
            details["body_excerpt"] = body_excerpt
        super().__init__(
            message,
            code=TRANSPORT_ERROR,
            subcode=http_subcode(status_code) if status_code is not None else None,
            status_code=status_code,
            details=details,
            source="server" if status_code is not None else "client",
        )
        self.cause = cause


class WebhookSignatureError(WorkOSError):
    """A webhook payload failed signature verification."""

    def __init__(self, message: str, *, subcode: Optional[str] = None) -> None:
        super().__init__(message, code=WEBHOOK_SIGNATURE_ERROR, subcode=subcode, source="client")


__all__ = [
    "WorkOSError",
    "UnauthorizedError",
    "OperationFailedError",
    "TransportFailureError",
    "WebhookSignatureError",
]
