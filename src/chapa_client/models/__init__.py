"""Domain models for the Chapa client."""

from chapa_client.models.exceptions import (
    ApiError,
    ChapaError,
    TransportError,
    ValidationError,
)
from chapa_client.models.transaction import (
    TRANSACTION_FIELD_RULES,
    ApiResult,
    ClientOptions,
    FieldRule,
    FieldType,
    TransactionRequest,
)

__all__ = [
    "ApiError",
    "ApiResult",
    "ChapaError",
    "ClientOptions",
    "FieldRule",
    "FieldType",
    "TRANSACTION_FIELD_RULES",
    "TransactionRequest",
    "TransportError",
    "ValidationError",
]
