# Licensed under the MIT license.

"""
Data models and request parameter types for the WorkOS SDK.

One module per resource group:

- :mod:`~workos_sdk.models.organization`: organizations and their domains.
- :mod:`~workos_sdk.models.sso`: connections, profiles, authorization URL parameters.
- :mod:`~workos_sdk.models.directory_sync`: directories, directory users and groups.
- :mod:`~workos_sdk.models.mfa`: authentication factors and challenges.
- :mod:`~workos_sdk.models.passwordless`: passwordless sessions.
- :mod:`~workos_sdk.models.user_management`: users and code authentication.
- :mod:`~workos_sdk.models.admin_portal`: admin portal links.
- :mod:`~workos_sdk.models.webhooks`: webhook payloads and events.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from
    the specific module files.
"""

__all__ = []
