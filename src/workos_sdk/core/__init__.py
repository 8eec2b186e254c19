# Licensed under the MIT license.

"""
Core infrastructure components for the WorkOS SDK.

This module contains the foundational components including the result
envelope, forward-compatible enum decoding, configuration, HTTP transport,
pagination, and error handling.
"""

from .results import (
    Ok,
    OperationError,
    Unauthorized,
    TransportError,
    WorkOSResult,
)
from .known_or_unknown import Known, Unknown, KnownOrUnknown

__all__ = [
    "Ok",
    "OperationError",
    "Unauthorized",
    "TransportError",
    "WorkOSResult",
    "Known",
    "Unknown",
    "KnownOrUnknown",
]
