# Licensed under the MIT license.

from workos_sdk.core.results import OperationError, Unauthorized
from workos_sdk.models.user_management import AuthenticateWithCodeParams, GetUserError

from conftest import API_KEY, BASE_URL


class TestGetUser:
    def test_get_user(self, client, fake_http, user_body):
        fake_http.queue(200, user_body)
        user = client.user_management.get_user("user_01E4ZCR3C56J083X43JQXF3JK5").unwrap()
        assert user.email_verified is True
        assert fake_http.last["url"] == f"{BASE_URL}/user_management/users/user_01E4ZCR3C56J083X43JQXF3JK5"

    def test_not_found_is_operation_error(self, client, fake_http):
        fake_http.queue(404, "User not found")
        result = client.user_management.get_user("user_missing")
        assert result == OperationError(GetUserError("not_found", "User not found"))


class TestAuthenticateWithCode:
    def test_success(self, client, fake_http, user_body):
        fake_http.queue(200, {"user": user_body, "organization_id": "org_1"})
        result = client.user_management.authenticate_with_code(
            AuthenticateWithCodeParams("client_123", "code_abc", ip_address="192.0.2.1")
        )
        assert result.value.organization_id == "org_1"
        assert fake_http.last["data"] == {
            "client_id": "client_123",
            "client_secret": API_KEY,
            "grant_type": "authorization_code",
            "code": "code_abc",
            "ip_address": "192.0.2.1",
        }

    def test_invalid_client_is_unauthorized(self, client, fake_http):
        fake_http.queue(400, {"error": "invalid_client", "error_description": "Invalid client ID."})
        result = client.user_management.authenticate_with_code(AuthenticateWithCodeParams("client_123", "code_abc"))
        assert result == Unauthorized()

    def test_invalid_grant_is_operation_error(self, client, fake_http):
        fake_http.queue(400, {"error": "invalid_grant", "error_description": "expired"})
        result = client.user_management.authenticate_with_code(AuthenticateWithCodeParams("client_123", "code_abc"))
        assert isinstance(result, OperationError)
        assert result.error.is_invalid_grant
