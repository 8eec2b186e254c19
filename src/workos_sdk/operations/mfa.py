# Licensed under the MIT license.

"""Multi-factor authentication operations namespace."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, Optional

from ..core._error_codes import MFA_INVALID_PHONE_NUMBER
from ..core.results import NoError, WorkOSResult
from ..core.types import AuthenticationFactorId, require_str
from ..models.mfa import (
    AuthenticationChallenge,
    AuthenticationFactor,
    ChallengeFactorParams,
    EnrollFactorError,
    EnrollFactorErrorCode,
    EnrollFactorParams,
    VerifyChallengeParams,
    VerifyChallengeResponse,
)

if TYPE_CHECKING:
    from ..client import WorkOSClient


def _decode_enroll_error(response: Any) -> Optional[EnrollFactorError]:
    """HTTP 422 ``{code, message}``: only ``invalid_phone_number`` is recognized."""
    body = response.json()
    code = require_str(body["code"], "code")
    message = require_str(body["message"], "message")
    if code == MFA_INVALID_PHONE_NUMBER:
        return EnrollFactorError(EnrollFactorErrorCode.INVALID_PHONE_NUMBER, message)
    return None


class MfaOperations:
    """
    Multi-factor authentication operations.

    Accessed via ``client.mfa``.

    Example::

        result = client.mfa.enroll_factor(EnrollFactorParams.sms("+15555555555"))
        if isinstance(result, OperationError):
            print(result.error.message)  # "Phone number is invalid: ..."
        factor = result.unwrap()

        challenge = client.mfa.challenge_factor(ChallengeFactorParams(factor.id)).unwrap()
        verification = client.mfa.verify_challenge(
            VerifyChallengeParams(challenge.id, code="123456")
        ).unwrap()
        print(verification.is_valid)
    """

    def __init__(self, client: "WorkOSClient") -> None:
        """
        Initialize MfaOperations.

        :param client: Parent WorkOSClient instance.
        :type client: WorkOSClient
        """
        self._client = client

    def enroll_factor(self, params: EnrollFactorParams) -> WorkOSResult[AuthenticationFactor, EnrollFactorError]:
        """
        Enroll a TOTP or SMS factor.

        HTTP 422 with code ``invalid_phone_number`` is an
        :class:`~workos_sdk.core.results.OperationError` carrying the server message;
        other 422 codes are a :class:`~workos_sdk.core.results.TransportError`.

        :param params: Factor kind and its settings.
        :type params: ~workos_sdk.models.mfa.EnrollFactorParams
        :return: The enrolled factor.
        :rtype: WorkOSResult[AuthenticationFactor, EnrollFactorError]
        """
        return self._client._get_api()._call(
            "post",
            ("auth", "factors", "enroll"),
            json=params.to_body(),
            decode=AuthenticationFactor.from_api_response,
            error_statuses=(422,),
            decode_error=_decode_enroll_error,
        )

    def get_factor(self, factor_id: AuthenticationFactorId) -> WorkOSResult[AuthenticationFactor, NoError]:
        return self._client._get_api()._call(
            "get", ("auth", "factors", factor_id), decode=AuthenticationFactor.from_api_response
        )

    def delete_factor(self, factor_id: AuthenticationFactorId) -> WorkOSResult[None, NoError]:
        return self._client._get_api()._call("delete", ("auth", "factors", factor_id), decode=None)

    def challenge_factor(self, params: ChallengeFactorParams) -> WorkOSResult[AuthenticationChallenge, NoError]:
        """
        Issue a challenge against a factor. SMS factors receive a text message.

        :param params: Factor and optional SMS template.
        :type params: ~workos_sdk.models.mfa.ChallengeFactorParams
        :return: The challenge.
        :rtype: WorkOSResult[AuthenticationChallenge, NoError]
        """
        return self._client._get_api()._call(
            "post",
            ("auth", "factors", params.authentication_factor_id, "challenge"),
            json=params.to_body(),
            decode=AuthenticationChallenge.from_api_response,
        )

    def verify_challenge(self, params: VerifyChallengeParams) -> WorkOSResult[VerifyChallengeResponse, NoError]:
        """
        Verify the code a user entered for a challenge.

        A wrong code is not an error: the result is ``Ok`` with ``is_valid`` False.

        :param params: Challenge and code.
        :type params: ~workos_sdk.models.mfa.VerifyChallengeParams
        :rtype: WorkOSResult[VerifyChallengeResponse, NoError]
        """
        return self._client._get_api()._call(
            "post",
            ("auth", "factors", "verify"),
            json=params.to_body(),
            decode=VerifyChallengeResponse.from_api_response,
        )

    def verify_factor(self, params: VerifyChallengeParams) -> WorkOSResult[VerifyChallengeResponse, NoError]:
        """
        Verify the code a user entered for a challenge.

        .. deprecated::
            Use :meth:`verify_challenge` instead.
        """
        warnings.warn(
            "MfaOperations.verify_factor() is deprecated. Use client.mfa.verify_challenge() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.verify_challenge(params)
