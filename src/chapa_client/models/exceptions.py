"""Custom exceptions for the Chapa client."""

import json
from typing import Any


class ChapaError(Exception):
    """Base exception for all Chapa client errors."""

    pass


class ValidationError(ChapaError):
    """
    Raised when a request fails local validation.

    Always raised before any HTTP call is made. The caller recovers by
    correcting the input; the client never retries it.

    Every violation found is kept in ``errors`` (in rule order), and the
    exception message is all of them joined by newlines.
    """

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


class ApiError(ChapaError):
    """
    Raised when the Chapa API responds with any status other than 200.

    ``payload`` holds the provider's parsed error body with the ``tx_ref``
    of the originating request merged in, so callers can correlate the
    failure without parsing the message. The message itself is the
    JSON-encoded payload.
    """

    def __init__(self, payload: dict[str, Any], status_code: int, tx_ref: str | None = None):
        self.payload = payload
        self.status_code = status_code
        self.tx_ref = tx_ref
        super().__init__(json.dumps(payload, default=str))


class TransportError(ChapaError):
    """
    Raised when the request never produced a usable API response.

    Examples:
    - Network or connection errors
    - Request timeout
    - Response body that is not a JSON object
    """

    def __init__(self, message: str, tx_ref: str | None = None):
        self.tx_ref = tx_ref
        super().__init__(message)
