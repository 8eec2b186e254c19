# Licensed under the MIT license.

"""
Typed Python client for the WorkOS REST API.

Every remote operation returns a result envelope (:class:`~workos_sdk.core.results.Ok`,
:class:`~workos_sdk.core.results.OperationError`, :class:`~workos_sdk.core.results.Unauthorized`
or :class:`~workos_sdk.core.results.TransportError`) instead of raising.
"""

__version__ = "0.1.0"

from .client import WorkOSClient

__all__ = ["WorkOSClient", "__version__"]
