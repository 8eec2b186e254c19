# Licensed under the MIT license.

import pytest

from workos_sdk.core.known_or_unknown import Known, Unknown
from workos_sdk.models.sso import (
    Connection,
    ConnectionSelector,
    ConnectionState,
    ConnectionType,
    ListConnectionsParams,
    Profile,
    ProfileAndToken,
    Provider,
)


class TestConnection:
    def test_decodes_known_type(self, connection_body):
        connection = Connection.from_api_response(connection_body)
        assert connection.connection_type == Known(ConnectionType.GOOGLE_OAUTH)
        assert connection.state == Known(ConnectionState.ACTIVE)
        assert connection.organization_id == "org_01EHWNCE74X7JSDV0X3SZ3KJNY"
        assert connection.timestamps is not None

    def test_unknown_type_is_preserved(self, connection_body):
        connection_body["connection_type"] = "BrandNewSAML"
        connection = Connection.from_api_response(connection_body)
        assert connection.connection_type == Unknown("BrandNewSAML")

    def test_type_token_is_case_sensitive(self, connection_body):
        connection_body["connection_type"] = "googleoauth"
        assert Connection.from_api_response(connection_body).connection_type == Unknown("googleoauth")

    def test_webhook_payload_without_timestamps(self, connection_body):
        del connection_body["created_at"]
        del connection_body["updated_at"]
        assert Connection.from_api_response(connection_body).timestamps is None

    def test_null_organization(self, connection_body):
        connection_body["organization_id"] = None
        assert Connection.from_api_response(connection_body).organization_id is None


class TestProfile:
    def test_decodes_profile(self, profile_body):
        profile = Profile.from_api_response(profile_body)
        assert profile.email == "todd@foo-corp.com"
        assert profile.connection_type == Known(ConnectionType.OKTA_SAML)
        assert profile.raw_attributes == {}

    def test_missing_raw_attributes_defaults_to_empty(self, profile_body):
        del profile_body["raw_attributes"]
        assert Profile.from_api_response(profile_body).raw_attributes == {}

    def test_missing_email_raises(self, profile_body):
        del profile_body["email"]
        with pytest.raises(KeyError):
            Profile.from_api_response(profile_body)

    def test_profile_and_token(self, profile_body):
        decoded = ProfileAndToken.from_api_response({"access_token": "01DMEK0J53CVMC32CK5SE0KZ8Q", "profile": profile_body})
        assert decoded.access_token == "01DMEK0J53CVMC32CK5SE0KZ8Q"
        assert decoded.profile.id == "prof_01DMC79VCBZ0NY2099737PSVF1"


class TestSelectorsAndParams:
    def test_selectors(self):
        assert ConnectionSelector.connection("conn_1").as_query_param() == ("connection", "conn_1")
        assert ConnectionSelector.organization("org_1").as_query_param() == ("organization", "org_1")
        assert ConnectionSelector.provider(Provider.GOOGLE_OAUTH).as_query_param() == ("provider", "GoogleOAuth")

    def test_list_connections_query(self):
        params = ListConnectionsParams(organization_id="org_1", connection_type=ConnectionType.OKTA_SAML)
        assert params.to_query() == {"order": "desc", "organization_id": "org_1", "connection_type": "OktaSAML"}

    def test_list_connections_accepts_raw_token(self):
        params = ListConnectionsParams(connection_type="FutureSAML")
        assert params.to_query()["connection_type"] == "FutureSAML"
