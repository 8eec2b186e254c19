# Licensed under the MIT license.

import pytest

from workos_sdk.core.errors import (
    OperationFailedError,
    TransportFailureError,
    UnauthorizedError,
    WorkOSError,
)
from workos_sdk.core.results import Ok, OperationError, TransportError, Unauthorized
from workos_sdk.models.mfa import EnrollFactorError, EnrollFactorErrorCode


class TestOk:
    def test_unwrap_returns_value(self):
        assert Ok(5).unwrap() == 5
        assert Ok(5).is_ok is True
        assert Ok(5).unwrap_or(0) == 5

    def test_equality(self):
        assert Ok("a") == Ok("a")
        assert Ok("a") != Ok("b")


class TestFailures:
    def test_operation_error_unwrap_raises(self):
        error = EnrollFactorError(EnrollFactorErrorCode.INVALID_PHONE_NUMBER, "Phone number is invalid: '73'")
        result = OperationError(error)
        assert result.is_ok is False
        assert result.unwrap_or("fallback") == "fallback"
        with pytest.raises(OperationFailedError) as ei:
            result.unwrap()
        assert ei.value.error is error
        assert ei.value.message == "Phone number is invalid: '73'"
        assert ei.value.to_dict()["code"] == "operation_error"

    def test_unauthorized_unwrap_raises(self):
        with pytest.raises(UnauthorizedError) as ei:
            Unauthorized().unwrap()
        err = ei.value.to_dict()
        assert err["status_code"] == 401
        assert err["subcode"] == "http_401"
        assert Unauthorized() == Unauthorized()

    def test_transport_error_unwrap_chains_cause(self):
        cause = ConnectionError("boom")
        result = TransportError("Request failed: boom", cause=cause)
        with pytest.raises(TransportFailureError) as ei:
            result.unwrap()
        assert ei.value.cause is cause
        assert ei.value.__cause__ is cause
        assert ei.value.subcode is None
        assert ei.value.source == "client"

    def test_transport_error_with_status(self):
        with pytest.raises(TransportFailureError) as ei:
            TransportError("Unexpected HTTP status 500", status_code=500, body="oops").unwrap()
        err = ei.value.to_dict()
        assert err["subcode"] == "http_500"
        assert err["details"]["body_excerpt"] == "oops"
        assert err["source"] == "server"

    def test_transport_error_equality_ignores_cause(self):
        assert TransportError("x", cause=ValueError("a")) == TransportError("x", cause=KeyError("b"))

    def test_all_bridge_errors_share_base(self):
        for exc_type in (OperationFailedError, TransportFailureError, UnauthorizedError):
            assert issubclass(exc_type, WorkOSError)
