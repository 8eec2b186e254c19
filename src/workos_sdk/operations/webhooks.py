# Licensed under the MIT license.

"""
Webhook parsing and signature verification.

WorkOS signs each delivery with a ``WorkOS-Signature`` header of the form
``t=<timestamp in ms>, v1=<hex HMAC-SHA256>``, computed over
``"<timestamp>.<raw body>"`` with the endpoint's secret.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

from ..core._error_codes import (
    WEBHOOK_MALFORMED_HEADER,
    WEBHOOK_MISSING_HEADER,
    WEBHOOK_SIGNATURE_MISMATCH,
    WEBHOOK_TIMESTAMP_OUT_OF_TOLERANCE,
)
from ..core.errors import WebhookSignatureError
from ..models.webhooks import Webhook

if TYPE_CHECKING:
    from ..client import WorkOSClient

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "WorkOS-Signature"
DEFAULT_TOLERANCE_SECONDS = 180

# Millisecond epoch timestamps have 13 digits.
_MAX_TIMESTAMP_DIGITS = 20

Payload = Union[str, bytes]


def _as_bytes(payload: Payload) -> bytes:
    if isinstance(payload, bytes):
        return payload
    return payload.encode("utf-8")


def _parse_signature_header(sig_header: Optional[str]) -> Tuple[str, str]:
    if not sig_header:
        raise WebhookSignatureError("Missing webhook signature header.", subcode=WEBHOOK_MISSING_HEADER)
    fields: Dict[str, str] = {}
    for part in sig_header.split(","):
        key, sep, value = part.strip().partition("=")
        if sep:
            fields[key] = value
    timestamp = fields.get("t")
    signature = fields.get("v1")
    well_formed = (
        timestamp is not None
        and 0 < len(timestamp) <= _MAX_TIMESTAMP_DIGITS
        and timestamp.isascii()
        and timestamp.isdigit()
        and bool(signature)
        and signature.isascii()
    )
    if not well_formed:
        raise WebhookSignatureError(
            f"Malformed webhook signature header: {sig_header!r}", subcode=WEBHOOK_MALFORMED_HEADER
        )
    return timestamp, signature


def compute_signature(payload: Payload, timestamp: str, secret: str) -> str:
    """
    Compute the hex ``v1`` signature for a payload.

    :param payload: Raw request body.
    :param timestamp: The ``t`` value of the header, in milliseconds.
    :param secret: Webhook endpoint secret.
    :return: Lowercase hex digest.
    """
    signed_payload = timestamp.encode("utf-8") + b"." + _as_bytes(payload)
    return hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()


def verify_header(
    payload: Payload,
    sig_header: Optional[str],
    secret: str,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    now: Optional[float] = None,
) -> None:
    """
    Verify a ``WorkOS-Signature`` header against the raw body.

    :param payload: Raw request body, exactly as received.
    :type payload: str | bytes
    :param sig_header: Value of the ``WorkOS-Signature`` header.
    :type sig_header: str | None
    :param secret: Webhook endpoint secret.
    :type secret: str
    :param tolerance: Maximum age of the delivery in seconds.
    :type tolerance: int
    :param now: Current time in seconds since the epoch; defaults to :func:`time.time`.
    :type now: float | None
    :raises ~workos_sdk.core.errors.WebhookSignatureError: If the header is missing or
        malformed, the timestamp is outside ``tolerance``, or the signature does not match.
    """
    timestamp, signature = _parse_signature_header(sig_header)
    current = time.time() if now is None else now
    # Compared in integer milliseconds.
    if abs(int(current * 1000) - int(timestamp)) > tolerance * 1000:
        raise WebhookSignatureError(
            "Webhook timestamp is outside the tolerance window.",
            subcode=WEBHOOK_TIMESTAMP_OUT_OF_TOLERANCE,
        )
    expected = compute_signature(payload, timestamp, secret)
    if not hmac.compare_digest(expected, signature):
        logger.debug("Webhook signature mismatch for timestamp %s", timestamp)
        raise WebhookSignatureError("Webhook signature does not match.", subcode=WEBHOOK_SIGNATURE_MISMATCH)


def parse_webhook(payload: Union[Payload, Dict[str, Any]]) -> Webhook:
    """
    Decode a webhook body without verifying it.

    :param payload: Raw JSON body, or an already parsed object.
    :return: The decoded webhook. Unrecognized event names keep their raw data.
    :raises ValueError: If the body is not valid JSON or contains a malformed timestamp.
    :raises KeyError: If a required field is missing.
    :raises TypeError: If a field has the wrong type.
    """
    body = payload if isinstance(payload, dict) else json.loads(payload)
    if not isinstance(body, dict):
        raise TypeError("webhook body must be a JSON object")
    return Webhook.from_api_response(body)


def construct_event(
    payload: Payload,
    sig_header: Optional[str],
    secret: str,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
) -> Webhook:
    """
    Verify a delivery and decode it.

    :raises ~workos_sdk.core.errors.WebhookSignatureError: If verification fails.
    """
    verify_header(payload, sig_header, secret, tolerance=tolerance)
    return parse_webhook(payload)


class WebhookOperations:
    """
    Webhook helpers. Accessed via ``client.webhooks``. No requests are made.

    Example:
        In a request handler::

            webhook = client.webhooks.construct_event(
                request.body, request.headers["WorkOS-Signature"], WEBHOOK_SECRET
            )
            if webhook.event == Known(WebhookEventType.DSYNC_USER_CREATED):
                provision(webhook.data)
    """

    def __init__(self, client: "WorkOSClient") -> None:
        self._client = client

    def verify_header(
        self,
        payload: Payload,
        sig_header: Optional[str],
        secret: str,
        tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    ) -> None:
        verify_header(payload, sig_header, secret, tolerance=tolerance)

    def construct_event(
        self,
        payload: Payload,
        sig_header: Optional[str],
        secret: str,
        tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    ) -> Webhook:
        return construct_event(payload, sig_header, secret, tolerance=tolerance)

    def parse_webhook(self, payload: Union[Payload, Dict[str, Any]]) -> Webhook:
        return parse_webhook(payload)
