"""Unit tests for the Chapa error taxonomy."""

import json

from chapa_client.models import ApiError, ChapaError, TransportError, ValidationError


def test_errors_share_base():
    """Test that every client error can be caught as ChapaError."""
    assert issubclass(ValidationError, ChapaError)
    assert issubclass(ApiError, ChapaError)
    assert issubclass(TransportError, ChapaError)


def test_validation_error_joins_messages():
    """Test that all violations are kept and newline-joined."""
    error = ValidationError(["Field 'amount' is required!", "Field 'email' is required!"])

    assert error.errors == ["Field 'amount' is required!", "Field 'email' is required!"]
    assert str(error) == "Field 'amount' is required!\nField 'email' is required!"


def test_validation_error_single_message():
    """Test that a single message is wrapped in a list."""
    error = ValidationError("Transaction reference must be a non-empty string!")

    assert error.errors == ["Transaction reference must be a non-empty string!"]


def test_api_error_payload():
    """Test that ApiError exposes its payload, status and reference."""
    error = ApiError({"message": "invalid", "tx_ref": "abc123"}, status_code=400, tx_ref="abc123")

    assert error.payload["message"] == "invalid"
    assert error.status_code == 400
    assert error.tx_ref == "abc123"
    assert json.loads(str(error)) == {"message": "invalid", "tx_ref": "abc123"}


def test_transport_error_reference():
    """Test that TransportError carries the reference it pertains to."""
    error = TransportError("Chapa API timeout", tx_ref="abc123")

    assert str(error) == "Chapa API timeout"
    assert error.tx_ref == "abc123"
