# Licensed under the MIT license.

"""
Walk through organizations, SSO connections and directories with a live API key.

Run from the repository root::

    WORKOS_API_KEY=sk_test_... python examples/quickstart.py
"""

import logging
import os
import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from workos_sdk import WorkOSClient
from workos_sdk.core.errors import WorkOSError
from workos_sdk.core.pagination import PaginationParams, iter_all, iter_pages
from workos_sdk.core.results import OperationError, TransportError, Unauthorized
from workos_sdk.models.admin_portal import AdminPortalIntent, GeneratePortalLinkParams
from workos_sdk.models.directory_sync import ListDirectoriesParams
from workos_sdk.models.organization import CreateOrganizationParams, ListOrganizationsParams
from workos_sdk.models.sso import ListConnectionsParams


def log_call(call: str) -> None:
    print({"call": call})


def describe(result) -> str:
    if isinstance(result, Unauthorized):
        return "unauthorized: check WORKOS_API_KEY"
    if isinstance(result, OperationError):
        return f"operation error: {result.error}"
    if isinstance(result, TransportError):
        return f"transport error: {result.message} (status={result.status_code})"
    return "ok"


def main() -> int:
    if not os.environ.get("WORKOS_API_KEY"):
        print("Set WORKOS_API_KEY to run this quickstart.")
        return 1
    if os.environ.get("WORKOS_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    with WorkOSClient() as client:
        log_call("organizations.list_organizations (all pages)")
        try:
            for organization in iter_all(
                client.organizations.list_organizations,
                ListOrganizationsParams(pagination=PaginationParams(limit=10)),
            ):
                print(f"  {organization.id}  {organization.name}  {[d.domain for d in organization.domains]}")
        except WorkOSError as exc:
            print(f"  listing stopped: {exc.to_dict()}")
            return 1

        log_call("organizations.create_organization")
        created = client.organizations.create_organization(
            CreateOrganizationParams(name="Quickstart Corp", domains=["quickstart.example"])
        )
        print(f"  {describe(created)}")
        if not created.is_ok:
            return 1
        organization = created.value

        log_call("sso.list_connections")
        for page in iter_pages(client.sso.list_connections, ListConnectionsParams(organization_id=organization.id)):
            if not page.is_ok:
                print(f"  {describe(page)}")
                break
            for connection in page.value:
                print(f"  {connection.id}  {connection.connection_type}  {connection.state}")

        log_call("directory_sync.list_directories")
        directories = client.directory_sync.list_directories(ListDirectoriesParams(organization_id=organization.id))
        print(f"  {describe(directories)}: {len(directories.unwrap_or([]))} directories")

        log_call("admin_portal.generate_portal_link")
        link = client.admin_portal.generate_portal_link(
            GeneratePortalLinkParams(organization.id, AdminPortalIntent.SSO)
        )
        print(f"  {link.value.link if link.is_ok else describe(link)}")

        log_call("organizations.delete_organization")
        print(f"  {describe(client.organizations.delete_organization(organization.id))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
