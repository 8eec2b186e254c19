# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for WorkOS SDK tests.

This module provides a recording fake transport, client factories and sample
response bodies that can be used across all test modules.
"""

import json

import pytest

from workos_sdk.client import WorkOSClient
from workos_sdk.core.config import WorkOSConfig

API_KEY = "sk_example_123456789"
BASE_URL = "https://api.workos.test"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code, body=None, headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        self._body = body
        if isinstance(body, (dict, list)):
            self.text = json.dumps(body)
        else:
            self.text = body or ""

    def json(self):
        if isinstance(self._body, (dict, list)):
            return self._body
        return json.loads(self.text)


class FakeHTTP:
    """Records every request and replays queued (status, body) responses in order."""

    def __init__(self, responses=None):
        self._responses = list(responses or [])
        self.calls = []

    def queue(self, status, body=None):
        self._responses.append((status, body))

    def queue_error(self, exc):
        self._responses.append(exc)

    def send(self, method, url, *, headers=None, **kwargs):
        self.calls.append({"method": method, "url": url, "headers": dict(headers or {}), **kwargs})
        if not self._responses:
            raise AssertionError("No more responses")
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        status, body = response
        return FakeResponse(status, body)

    def close(self):
        pass

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return WorkOSConfig(base_url=BASE_URL, user_agent="workos-sdk-tests", http_retries=0, http_timeout=5)


@pytest.fixture
def fake_http():
    return FakeHTTP()


@pytest.fixture
def client(test_config, fake_http):
    """WorkOSClient whose transport is the ``fake_http`` fixture."""
    c = WorkOSClient(API_KEY, config=test_config)
    c._get_api()._http = fake_http
    return c


@pytest.fixture
def timestamps():
    return {"created_at": "2021-06-25T19:07:33.155Z", "updated_at": "2021-06-25T19:07:33.155Z"}


@pytest.fixture
def organization_body(timestamps):
    return {
        "object": "organization",
        "id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
        "name": "Foo Corp",
        "allow_profiles_outside_organization": False,
        "domains": [
            {
                "object": "organization_domain",
                "id": "org_domain_01EHZNVPK2QXHMVWCEDQEKY69A",
                "domain": "foo-corp.com",
            }
        ],
        **timestamps,
    }


@pytest.fixture
def connection_body(timestamps):
    return {
        "object": "connection",
        "id": "conn_01E4ZCR3C56J083X43JQXF3JK5",
        "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
        "connection_type": "GoogleOAuth",
        "name": "Foo Corp",
        "state": "active",
        **timestamps,
    }


@pytest.fixture
def profile_body():
    return {
        "object": "profile",
        "id": "prof_01DMC79VCBZ0NY2099737PSVF1",
        "connection_id": "conn_01E4ZCR3C56J083X43JQXF3JK5",
        "connection_type": "OktaSAML",
        "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
        "email": "todd@foo-corp.com",
        "first_name": "Todd",
        "idp_id": "00u1a0ufowBJlzPlk357",
        "last_name": "Rundgren",
        "raw_attributes": {},
    }


@pytest.fixture
def directory_body(timestamps):
    return {
        "id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
        "domain": "foo-corp.com",
        "name": "Foo Corp",
        "organization_id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
        "state": "inactive",
        "type": "bamboohr",
        **timestamps,
    }


@pytest.fixture
def directory_user_body(timestamps):
    return {
        "id": "directory_user_01E1JG7J09H96KYP8HM9B0G5SJ",
        "idp_id": "2836",
        "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
        "organization_id": "org_01EZTR6WYX1A0DSE2CYMGXQ24Y",
        "first_name": "Marcelina",
        "last_name": "Davis",
        "username": "marcelina@foo-corp.com",
        "emails": [{"primary": True, "type": "work", "value": "marcelina@foo-corp.com"}],
        "state": "active",
        "custom_attributes": {"department": "Engineering"},
        "raw_attributes": {"idp_id": "2836"},
        **timestamps,
    }


@pytest.fixture
def directory_group_body(timestamps):
    return {
        "id": "directory_group_01E1JJS84MFPPQ3G655FHTKX6Z",
        "idp_id": "02grqrue4294w24",
        "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
        "organization_id": "org_01EZTR6WYX1A0DSE2CYMGXQ24Y",
        "name": "Developers",
        "raw_attributes": {},
        **timestamps,
    }


@pytest.fixture
def user_body():
    return {
        "object": "user",
        "id": "user_01E4ZCR3C56J083X43JQXF3JK5",
        "email": "marcelina.davis@example.com",
        "first_name": "Marcelina",
        "last_name": "Davis",
        "email_verified": True,
        "profile_picture_url": "https://workoscdn.com/images/v1/123abc",
        "created_at": "2021-06-25T19:07:33.155Z",
        "updated_at": "2021-06-25T19:07:33.155Z",
    }


@pytest.fixture
def challenge_body():
    return {
        "object": "authentication_challenge",
        "id": "auth_challenge_01FVYZWQTZQ5VB6BC5MPG2EYC5",
        "created_at": "2022-02-15T15:26:53.274Z",
        "updated_at": "2022-02-15T15:26:53.274Z",
        "expires_at": "2022-02-15T15:36:53.279Z",
        "code": "12345",
        "authentication_factor_id": "auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ",
    }
