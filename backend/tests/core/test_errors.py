"""Error Hierarchy - verifies envelopes, status codes and challenge headers."""

from beavernet.core.errors import (
    AccessDeniedError, AuthenticationError, CallTakerVerificationError,
    ConstraintViolationError,
    DuplicateRecordError, PaymentGatewayError, PaymentNotConfiguredError,
    ResourceNotFoundError,
)


def test_authentication_error_carries_basic_challenge():
    err = AuthenticationError("Authentication required", "BEAVERNET System")
    assert err.http_status == 401
    assert err.headers == {"WWW-Authenticate": 'Basic realm="BEAVERNET System"'}
    body = err.to_response()
    assert body["error"]["code"] == "AUTHENTICATION_REQUIRED"
    assert body["error"]["category"] == "authentication"


def test_call_taker_error_has_no_challenge():
    err = CallTakerVerificationError("PIN")
    assert err.http_status == 401
    assert err.headers == {}
    assert err.to_response()["error"]["message"] == "Invalid PIN"


def test_access_denied_lists_levels_and_user_level():
    err = AccessDeniedError(["SuperAdmin", "Admin"], "User")
    body = err.to_response()["error"]
    assert err.http_status == 403
    assert body["message"] == (
        "Access denied: Requires one of the following access levels: SuperAdmin, Admin"
    )
    assert body["user_level"] == "User"


def test_access_denied_without_level():
    err = AccessDeniedError(["Admin"], None)
    assert err.message == "Access denied: No access level specified"


def test_not_found_message_names_the_record():
    err = ResourceNotFoundError("Incident", 42)
    assert err.http_status == 404
    assert err.message == "Incident '42' not found"


def test_duplicate_is_conflict():
    assert DuplicateRecordError("Unit").http_status == 409


def test_constraint_violation_is_client_error():
    err = ConstraintViolationError("Incident")
    assert err.http_status == 400
    assert err.to_response()["error"]["category"] == "validation"


def test_payment_errors_use_flat_envelope():
    assert PaymentNotConfiguredError().to_response() == {"error": "PayPal is not configured"}
    assert PaymentNotConfiguredError().http_status == 503
    gateway = PaymentGatewayError("Failed to create order.", "create_order")
    assert gateway.to_response() == {"error": "Failed to create order."}
    assert gateway.http_status == 500
