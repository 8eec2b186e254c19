# Licensed under the MIT license.

import pytest
import requests

from workos_sdk.core.config import WorkOSConfig
from workos_sdk.core.results import Ok, TransportError
from workos_sdk.data._api import _ApiClient

from conftest import API_KEY, BASE_URL, FakeHTTP


@pytest.fixture
def api(test_config):
    api = _ApiClient(API_KEY, test_config)
    api._http = FakeHTTP()
    return api


class TestUrlBuilding:
    def test_segments_are_joined_under_base_url(self, api):
        assert api._url("organizations", "org_123") == f"{BASE_URL}/organizations/org_123"

    def test_identifiers_are_percent_encoded(self, api):
        assert api._url("organizations", "a/b?c") == f"{BASE_URL}/organizations/a%2Fb%3Fc"

    def test_empty_identifier_is_passed_through(self, api):
        assert api._url("organizations", "") == f"{BASE_URL}/organizations/"

    def test_trailing_slash_on_base_url(self):
        api = _ApiClient(API_KEY, WorkOSConfig(base_url="https://api.workos.test/"))
        assert api._url("sso", "token") == "https://api.workos.test/sso/token"

    @pytest.mark.parametrize("base_url", ["api.workos.com", "ftp://api.workos.com", "https://"])
    def test_malformed_base_url_raises(self, base_url):
        with pytest.raises(ValueError):
            _ApiClient(API_KEY, WorkOSConfig(base_url=base_url))._url("organizations")


class TestHeaders:
    def test_bearer_and_user_agent(self, api):
        headers = api._headers()
        assert headers["Authorization"] == f"Bearer {API_KEY}"
        assert headers["User-Agent"] == "workos-sdk-tests"
        assert headers["Accept"] == "application/json"

    def test_bearer_override(self, api):
        assert api._headers("access_token_1")["Authorization"] == "Bearer access_token_1"


class TestCall:
    def test_success(self, api):
        api._http.queue(200, {"name": "Foo"})
        result = api._call("get", ("organizations", "org_1"), decode=lambda b: b["name"])
        assert result == Ok("Foo")
        call = api._http.last
        assert call["method"] == "get"
        assert call["url"] == f"{BASE_URL}/organizations/org_1"
        assert "params" not in call and "json" not in call and "data" not in call

    def test_query_json_and_form_are_forwarded(self, api):
        api._http.queue(200, {})
        api._call("post", ("x",), decode=None, params={"a": "1"}, json={"b": 2}, data={"c": "3"})
        call = api._http.last
        assert call["params"] == {"a": "1"}
        assert call["json"] == {"b": 2}
        assert call["data"] == {"c": "3"}

    def test_network_failure_is_transport_error(self, api):
        exc = requests.exceptions.ConnectionError("refused")
        api._http.queue_error(exc)
        result = api._call("get", ("organizations",), decode=lambda b: b)
        assert isinstance(result, TransportError)
        assert result.cause is exc
        assert result.status_code is None

    def test_malformed_base_url_is_transport_error(self):
        api = _ApiClient(API_KEY, WorkOSConfig(base_url="not a url"))
        api._http = FakeHTTP()
        result = api._call("get", ("organizations",), decode=lambda b: b)
        assert isinstance(result, TransportError)
        assert isinstance(result.cause, ValueError)
        assert api._http.calls == []

    def test_unserializable_body_is_transport_error(self, api):
        api._http.queue_error(TypeError("Object of type set is not JSON serializable"))
        result = api._call("post", ("organizations",), decode=lambda b: b, json={"domains": {"a"}})
        assert isinstance(result, TransportError)
