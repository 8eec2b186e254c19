# Licensed under the MIT license.

"""Multi-factor authentication models: factors, challenges and their parameters."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..core._error_codes import MFA_INVALID_PHONE_NUMBER
from ..core.known_or_unknown import KnownOrUnknown, decode_known_or_unknown
from ..core.types import (
    AuthenticationChallengeId,
    AuthenticationFactorId,
    MfaCode,
    Timestamps,
    optional_str,
    parse_optional_timestamp,
    require_bool,
    require_str,
)


class AuthenticationFactorType(str, Enum):
    TOTP = "totp"
    SMS = "sms"


@dataclass(frozen=True)
class TotpFactor:
    """Time-based one-time password details, returned when a TOTP factor is enrolled."""

    qr_code: str
    secret: str
    uri: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "TotpFactor":
        return cls(
            qr_code=require_str(data["qr_code"], "qr_code"),
            secret=require_str(data["secret"], "secret"),
            uri=require_str(data["uri"], "uri"),
        )


@dataclass(frozen=True)
class SmsFactor:
    phone_number: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "SmsFactor":
        return cls(phone_number=require_str(data["phone_number"], "phone_number"))


@dataclass(frozen=True)
class AuthenticationFactor:
    """
    An enrolled authentication factor.

    :param id: Factor identifier.
    :type id: str
    :param type: Factor kind.
    :type type: Known[AuthenticationFactorType] | Unknown
    :param timestamps: Creation and update times.
    :type timestamps: ~workos_sdk.core.types.Timestamps
    :param totp: TOTP details, present for TOTP factors.
    :type totp: TotpFactor | None
    :param sms: SMS details, present for SMS factors.
    :type sms: SmsFactor | None
    """

    id: AuthenticationFactorId
    type: KnownOrUnknown[AuthenticationFactorType]
    timestamps: Timestamps
    totp: Optional[TotpFactor] = None
    sms: Optional[SmsFactor] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "AuthenticationFactor":
        totp = data.get("totp")
        sms = data.get("sms")
        return cls(
            id=AuthenticationFactorId(require_str(data["id"], "id")),
            type=decode_known_or_unknown(AuthenticationFactorType, data["type"]),
            timestamps=Timestamps.from_api_response(data),
            totp=TotpFactor.from_api_response(totp) if totp is not None else None,
            sms=SmsFactor.from_api_response(sms) if sms is not None else None,
        )


@dataclass(frozen=True)
class AuthenticationChallenge:
    """
    A challenge issued against a factor.

    :param id: Challenge identifier.
    :param authentication_factor_id: Factor the challenge was issued for.
    :param expires_at: Expiry time, when the challenge expires.
    :param timestamps: Creation and update times.
    :param code: One-time code; only present in non-production environments.
    """

    id: AuthenticationChallengeId
    authentication_factor_id: AuthenticationFactorId
    timestamps: Timestamps
    expires_at: Optional[_dt.datetime] = None
    code: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "AuthenticationChallenge":
        return cls(
            id=AuthenticationChallengeId(require_str(data["id"], "id")),
            authentication_factor_id=AuthenticationFactorId(
                require_str(data["authentication_factor_id"], "authentication_factor_id")
            ),
            timestamps=Timestamps.from_api_response(data),
            expires_at=parse_optional_timestamp(data.get("expires_at")),
            code=optional_str(data.get("code"), "code"),
        )


@dataclass(frozen=True)
class VerifyChallengeResponse:
    """
    Outcome of verifying a challenge.

    :param challenge: The challenge that was verified.
    :param is_valid: Whether the submitted code was correct.
    """

    challenge: AuthenticationChallenge
    is_valid: bool

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "VerifyChallengeResponse":
        return cls(
            challenge=AuthenticationChallenge.from_api_response(data["challenge"]),
            is_valid=require_bool(data["valid"], "valid"),
        )


@dataclass(frozen=True)
class EnrollFactorParams:
    """
    Parameters for enrolling a factor. Build with :meth:`totp` or :meth:`sms`.

    Example::

        EnrollFactorParams.totp(issuer="Foo Corp", user="alan.turing@foo-corp.com")
        EnrollFactorParams.sms(phone_number="+15555555555")
    """

    type: AuthenticationFactorType
    totp_issuer: Optional[str] = None
    totp_user: Optional[str] = None
    phone_number: Optional[str] = None

    @classmethod
    def totp(cls, issuer: str, user: str) -> "EnrollFactorParams":
        return cls(AuthenticationFactorType.TOTP, totp_issuer=issuer, totp_user=user)

    @classmethod
    def sms(cls, phone_number: str) -> "EnrollFactorParams":
        return cls(AuthenticationFactorType.SMS, phone_number=phone_number)

    def to_body(self) -> Dict[str, Any]:
        if self.type == AuthenticationFactorType.TOTP:
            return {"type": "totp", "totp_user": self.totp_user, "totp_issuer": self.totp_issuer}
        return {"type": "sms", "phone_number": self.phone_number}


class EnrollFactorErrorCode(str, Enum):
    INVALID_PHONE_NUMBER = MFA_INVALID_PHONE_NUMBER


@dataclass(frozen=True)
class EnrollFactorError:
    """
    Recognized enrollment failure (HTTP 422).

    :param code: Failure kind.
    :param message: Server message, e.g. ``"Phone number is invalid: '73'"``.
    """

    code: EnrollFactorErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ChallengeFactorParams:
    """
    :param authentication_factor_id: Factor to challenge.
    :param sms_template: Message template for SMS factors; ``{{code}}`` is replaced with the code.
    """

    authentication_factor_id: AuthenticationFactorId
    sms_template: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.sms_template is not None:
            body["sms_template"] = self.sms_template
        return body


@dataclass(frozen=True)
class VerifyChallengeParams:
    authentication_challenge_id: AuthenticationChallengeId
    code: MfaCode

    def to_body(self) -> Dict[str, Any]:
        return {"authentication_challenge_id": self.authentication_challenge_id, "code": self.code}


__all__ = [
    "AuthenticationFactorType",
    "AuthenticationFactor",
    "TotpFactor",
    "SmsFactor",
    "AuthenticationChallenge",
    "VerifyChallengeResponse",
    "EnrollFactorParams",
    "EnrollFactorErrorCode",
    "EnrollFactorError",
    "ChallengeFactorParams",
    "VerifyChallengeParams",
]
