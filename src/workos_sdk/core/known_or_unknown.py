# Licensed under the MIT license.

"""
Forward-compatible decoding of server-controlled string enumerations.

Fields such as a connection type or directory type may gain new values on the
server at any time. They decode to :class:`Known` when the token matches one
of the enum's documented values exactly, and to :class:`Unknown` otherwise,
with the raw token kept verbatim so it can be echoed back unchanged.

Example::

    >>> decode_known_or_unknown(DirectoryType, "gsuite directory")
    Known(value=<DirectoryType.GSUITE_DIRECTORY: 'gsuite directory'>)
    >>> decode_known_or_unknown(DirectoryType, "GSuite Directory")
    Unknown(raw='GSuite Directory')
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Type, TypeVar, Union

K = TypeVar("K", bound=Enum)


@dataclass(frozen=True)
class Known(Generic[K]):
    """
    A token that matched a documented enum value.

    :param value: The matching enum member.
    """

    value: K

    @property
    def raw(self) -> str:
        """The documented wire token for ``value``."""
        return self.value.value


@dataclass(frozen=True)
class Unknown:
    """
    A token this version of the SDK does not recognize.

    :param raw: The token exactly as the server sent it.
    """

    raw: str


KnownOrUnknown = Union[Known[K], Unknown]


def decode_known_or_unknown(enum_cls: Type[K], token: str) -> KnownOrUnknown[K]:
    """
    Decode a wire token against ``enum_cls``.

    Matching is exact and case-sensitive against the members' values. Any
    string that does not match decodes to :class:`Unknown`.

    :param enum_cls: Enum whose member values are the documented tokens.
    :type enum_cls: type[enum.Enum]
    :param token: Token received from the server.
    :type token: :class:`str`
    :return: :class:`Known` or :class:`Unknown`.
    :raises TypeError: If ``token`` is not a string (a malformed response).
    """
    if not isinstance(token, str):
        raise TypeError(f"{enum_cls.__name__} token must be a string, got {type(token).__name__}")
    member = enum_cls._value2member_map_.get(token)
    if member is None:
        return Unknown(token)
    return Known(member)


def encode_known_or_unknown(value: KnownOrUnknown) -> str:
    """
    Encode a decoded value back to its wire token.

    :param value: :class:`Known` or :class:`Unknown` value.
    :return: The documented token for ``Known``, the stored raw token for ``Unknown``.
    :rtype: :class:`str`
    """
    if isinstance(value, Known):
        return value.value.value
    if isinstance(value, Unknown):
        return value.raw
    raise TypeError(f"Expected Known or Unknown, got {type(value).__name__}")


def known_or_unknown(enum_cls: Type[K], value: Union[K, str, Known[K], Unknown]) -> KnownOrUnknown[K]:
    """
    Coerce a caller-supplied value into a :class:`Known` or :class:`Unknown`.

    Accepts an enum member, a raw token, or an already decoded value, so request
    parameters can take whichever form is at hand.
    """
    if isinstance(value, (Known, Unknown)):
        return value
    if isinstance(value, enum_cls):
        return Known(value)
    return decode_known_or_unknown(enum_cls, value)


__all__ = [
    "Known",
    "Unknown",
    "KnownOrUnknown",
    "decode_known_or_unknown",
    "encode_known_or_unknown",
    "known_or_unknown",
]
