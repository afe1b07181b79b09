"""Async client for the Chapa payment API."""

from chapa_client.client import ChapaClient
from chapa_client.config import ChapaSettings
from chapa_client.logging_config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from chapa_client.models import (
    ApiError,
    ApiResult,
    ChapaError,
    ClientOptions,
    TransactionRequest,
    TransportError,
    ValidationError,
)

__all__ = [
    "ApiError",
    "ApiResult",
    "ChapaClient",
    "ChapaError",
    "ChapaSettings",
    "ClientOptions",
    "TransactionRequest",
    "TransportError",
    "ValidationError",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
