# Licensed under the MIT license.

"""Error code and subcode constants shared by the result envelope and exception bridge."""

# Subcode of UnauthorizedError; other statuses go through http_subcode()
HTTP_401 = "http_401"


def http_subcode(status_code: int) -> str:
    """Return the ``http_<status>`` subcode for an HTTP status."""
    return f"http_{status_code}"


# Top-level error codes carried by WorkOSError.code
UNAUTHORIZED = "unauthorized"
OPERATION_ERROR = "operation_error"
TRANSPORT_ERROR = "transport_error"
WEBHOOK_SIGNATURE_ERROR = "webhook_signature_error"

# OAuth-style error codes returned by token exchange endpoints (HTTP 400)
OAUTH_INVALID_CLIENT = "invalid_client"
OAUTH_UNAUTHORIZED_CLIENT = "unauthorized_client"
OAUTH_INVALID_GRANT = "invalid_grant"

# OAuth errors that reject the client identity rather than the request
OAUTH_CLIENT_IDENTITY_ERRORS = frozenset({OAUTH_INVALID_CLIENT, OAUTH_UNAUTHORIZED_CLIENT})

# MFA validation codes (HTTP 422)
MFA_INVALID_PHONE_NUMBER = "invalid_phone_number"

# User management
USER_NOT_FOUND = "not_found"

# Webhook signature subcodes
WEBHOOK_MISSING_HEADER = "webhook_missing_header"
WEBHOOK_MALFORMED_HEADER = "webhook_malformed_header"
WEBHOOK_TIMESTAMP_OUT_OF_TOLERANCE = "webhook_timestamp_out_of_tolerance"
WEBHOOK_SIGNATURE_MISMATCH = "webhook_signature_mismatch"
