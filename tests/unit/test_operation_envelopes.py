# Licensed under the MIT license.

"""Every request-issuing operation maps 401 and undecodable success bodies the same way."""

import pytest

from workos_sdk.core.results import TransportError, Unauthorized
from workos_sdk.models.admin_portal import AdminPortalIntent, GeneratePortalLinkParams
from workos_sdk.models.directory_sync import (
    DirectoryGroupsFilter,
    DirectoryUsersFilter,
    ListDirectoryGroupsParams,
    ListDirectoryUsersParams,
)
from workos_sdk.models.mfa import ChallengeFactorParams, EnrollFactorParams, VerifyChallengeParams
from workos_sdk.models.organization import CreateOrganizationParams, UpdateOrganizationParams
from workos_sdk.models.passwordless import CreatePasswordlessSessionParams
from workos_sdk.models.sso import GetProfileAndTokenParams
from workos_sdk.models.user_management import AuthenticateWithCodeParams

OPERATIONS = {
    "list_organizations": lambda c: c.organizations.list_organizations(),
    "get_organization": lambda c: c.organizations.get_organization("org_1"),
    "create_organization": lambda c: c.organizations.create_organization(CreateOrganizationParams("Foo")),
    "update_organization": lambda c: c.organizations.update_organization(UpdateOrganizationParams("org_1")),
    "get_profile_and_token": lambda c: c.sso.get_profile_and_token(GetProfileAndTokenParams("client_1", "code")),
    "get_profile": lambda c: c.sso.get_profile("token"),
    "get_connection": lambda c: c.sso.get_connection("conn_1"),
    "list_connections": lambda c: c.sso.list_connections(),
    "list_directories": lambda c: c.directory_sync.list_directories(),
    "get_directory": lambda c: c.directory_sync.get_directory("directory_1"),
    "list_directory_users": lambda c: c.directory_sync.list_directory_users(
        ListDirectoryUsersParams(DirectoryUsersFilter.directory("directory_1"))
    ),
    "get_directory_user": lambda c: c.directory_sync.get_directory_user("directory_user_1"),
    "list_directory_groups": lambda c: c.directory_sync.list_directory_groups(
        ListDirectoryGroupsParams(DirectoryGroupsFilter.directory("directory_1"))
    ),
    "get_directory_group": lambda c: c.directory_sync.get_directory_group("directory_group_1"),
    "enroll_factor": lambda c: c.mfa.enroll_factor(EnrollFactorParams.sms("+15005550006")),
    "get_factor": lambda c: c.mfa.get_factor("auth_factor_1"),
    "challenge_factor": lambda c: c.mfa.challenge_factor(ChallengeFactorParams("auth_factor_1")),
    "verify_challenge": lambda c: c.mfa.verify_challenge(VerifyChallengeParams("auth_challenge_1", "123456")),
    "create_passwordless_session": lambda c: c.passwordless.create_passwordless_session(
        CreatePasswordlessSessionParams("a@foo-corp.com")
    ),
    "get_user": lambda c: c.user_management.get_user("user_1"),
    "authenticate_with_code": lambda c: c.user_management.authenticate_with_code(
        AuthenticateWithCodeParams("client_1", "code")
    ),
    "generate_portal_link": lambda c: c.admin_portal.generate_portal_link(
        GeneratePortalLinkParams("org_1", AdminPortalIntent.DIRECTORY_SYNC)
    ),
}

BODILESS_OPERATIONS = {
    "delete_organization": lambda c: c.organizations.delete_organization("org_1"),
    "delete_connection": lambda c: c.sso.delete_connection("conn_1"),
    "delete_directory": lambda c: c.directory_sync.delete_directory("directory_1"),
    "delete_factor": lambda c: c.mfa.delete_factor("auth_factor_1"),
    "send_passwordless_session": lambda c: c.passwordless.send_passwordless_session("passwordless_session_1"),
}


@pytest.mark.parametrize("call", list({**OPERATIONS, **BODILESS_OPERATIONS}.values()),
                         ids=list({**OPERATIONS, **BODILESS_OPERATIONS}))
def test_401_is_unauthorized(client, fake_http, call):
    fake_http.queue(401, {"message": "Unauthorized"})
    assert call(client) == Unauthorized()


@pytest.mark.parametrize("call", list(OPERATIONS.values()), ids=list(OPERATIONS))
def test_malformed_success_body_is_transport_error(client, fake_http, call):
    fake_http.queue(200, {"unexpected": True})
    result = call(client)
    assert isinstance(result, TransportError)
    assert result.status_code == 200


@pytest.mark.parametrize("call", list(OPERATIONS.values()), ids=list(OPERATIONS))
def test_non_json_success_body_is_transport_error(client, fake_http, call):
    fake_http.queue(200, "<html>gateway</html>")
    result = call(client)
    assert isinstance(result, TransportError)
    assert result.body == "<html>gateway</html>"


@pytest.mark.parametrize("call", list(OPERATIONS.values()), ids=list(OPERATIONS))
def test_unlisted_status_is_transport_error(client, fake_http, call):
    fake_http.queue(503, "Service Unavailable")
    result = call(client)
    assert isinstance(result, TransportError)
    assert result.status_code == 503
