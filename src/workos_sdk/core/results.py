# Licensed under the MIT license.

"""
Result envelope returned by every WorkOS SDK operation.

An operation returns exactly one of four variants:

- :class:`Ok`: the request succeeded; ``value`` holds the decoded response.
- :class:`OperationError`: the server rejected the request with a failure the
  operation recognizes; ``error`` holds the operation's typed error value.
- :class:`Unauthorized`: the server answered HTTP 401, or rejected the client
  identity during an OAuth-style exchange.
- :class:`TransportError`: the request could not be sent, or the response was
  not one the operation understands.

Example::

    result = client.organizations.get_organization("org_123")
    if isinstance(result, Ok):
        print(result.value.name)
    elif isinstance(result, Unauthorized):
        print("check the API key")
    else:
        print(f"failed: {result}")

    # Or opt into exceptions
    organization = client.organizations.get_organization("org_123").unwrap()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, NoReturn, Optional, TypeVar, Union

from .errors import OperationFailedError, TransportFailureError, UnauthorizedError

T = TypeVar("T")
E = TypeVar("E")
D = TypeVar("D")

# Error parameter for operations that recognize no failure status.
NoError = NoReturn


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Successful outcome.

    :param value: Decoded response payload.
    """

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        """
        Return the decoded value.

        :return: The success payload.
        """
        return self.value

    def unwrap_or(self, default: D) -> Union[T, D]:
        return self.value


@dataclass(frozen=True)
class OperationError(Generic[E]):
    """
    Recognized, operation-specific failure.

    :param error: Typed error value; its type is specific to each operation.
    """

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """
        :raises ~workos_sdk.core.errors.OperationFailedError: Always.
        """
        raise OperationFailedError(self.error)

    def unwrap_or(self, default: D) -> D:
        return default


@dataclass(frozen=True)
class Unauthorized:
    """The credential was rejected. Carries no payload."""

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """
        :raises ~workos_sdk.core.errors.UnauthorizedError: Always.
        """
        raise UnauthorizedError()

    def unwrap_or(self, default: D) -> D:
        return default


@dataclass(frozen=True)
class TransportError:
    """
    Network, URL construction, or response decoding failure.

    :param message: Description of what went wrong.
    :type message: :class:`str`
    :param status_code: HTTP status, when a response was received.
    :type status_code: :class:`int` | None
    :param body: Leading part of the response body, when available.
    :type body: :class:`str` | None
    :param cause: Underlying exception, when there was one. Not part of equality.
    :type cause: :class:`BaseException` | None
    """

    message: str
    status_code: Optional[int] = None
    body: Optional[str] = None
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """
        :raises ~workos_sdk.core.errors.TransportFailureError: Always, chained to ``cause``.
        """
        raise TransportFailureError(
            self.message,
            status_code=self.status_code,
            body_excerpt=self.body,
            cause=self.cause,
        ) from self.cause

    def unwrap_or(self, default: D) -> D:
        return default


WorkOSResult = Union[Ok[T], OperationError[E], Unauthorized, TransportError]


__all__ = [
    "Ok",
    "OperationError",
    "Unauthorized",
    "TransportError",
    "WorkOSResult",
    "NoError",
]
