# Licensed under the MIT license.

"""
Operation namespace classes for the WorkOS SDK.

Each class groups the operations of one resource and is exposed as an
attribute of :class:`~workos_sdk.client.WorkOSClient`:

- OrganizationOperations: ``client.organizations``
- SsoOperations: ``client.sso``
- DirectorySyncOperations: ``client.directory_sync``
- MfaOperations: ``client.mfa``
- PasswordlessOperations: ``client.passwordless``
- UserManagementOperations: ``client.user_management``
- AdminPortalOperations: ``client.admin_portal``
- WebhookOperations: ``client.webhooks``
"""

__all__ = []
