"""Chapa API client for initializing and verifying transactions."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from chapa_client.config import ChapaSettings
from chapa_client.models import (
    ApiError,
    ApiResult,
    ClientOptions,
    TransportError,
)
from chapa_client.normalization import normalize_transaction
from chapa_client.validation import validate_reference, validate_transaction

logger = structlog.get_logger(__name__)


class ChapaClient:
    """
    Client for the Chapa payment API.

    Each call runs a linear pipeline: local validation, normalization
    (initialize only) and a single HTTP round trip. The client keeps no
    per-call state, so one instance can serve concurrent calls.

    Failures are surfaced immediately, never retried:
    - ValidationError before any request is sent
    - ApiError for any non-200 response
    - TransportError for network errors, timeouts and non-JSON bodies
    """

    def __init__(
        self,
        secret_key: str,
        http_client: httpx.AsyncClient | None = None,
        settings: ChapaSettings | None = None,
    ):
        """
        Initialize the Chapa client.

        Args:
            secret_key: Chapa secret key sent as a bearer token on every call
            http_client: Optional HTTP client to issue requests with. When
                omitted the client creates (and later closes) its own.
            settings: Endpoint and timeout settings (default: ChapaSettings())
        """
        self.settings = settings or ChapaSettings()
        self._secret_key = secret_key
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=self.settings.timeout_seconds
        )

        logger.info(
            "chapa_client_initialized",
            base_url=self.settings.base_url,
            owns_http_client=self._owns_http_client,
        )

    @classmethod
    def from_settings(
        cls,
        settings: ChapaSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "ChapaClient":
        """Create a client whose secret key comes from settings (CHAPA_SECRET_KEY)."""
        settings = settings or ChapaSettings()
        return cls(settings.secret_key, http_client=http_client, settings=settings)

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every outbound request."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._secret_key}",
        }

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def initialize(
        self,
        request: Mapping[str, Any],
        options: ClientOptions | None = None,
    ) -> ApiResult:
        """
        Initialize a payment transaction.

        See: https://developer.chapa.co/docs/accept-payments/

        Args:
            request: Transaction request (amount, currency, email, first_name,
                last_name, callback_url, optional tx_ref and customization)
            options: ClientOptions; set auto_ref=True to generate a missing tx_ref

        Returns:
            Parsed API response with the request's tx_ref attached

        Raises:
            ValidationError: Request is missing fields or has wrongly typed ones
            ApiError: Chapa responded with a non-200 status
            TransportError: Network failure, timeout or non-JSON response
        """
        validate_transaction(request, options)
        body = normalize_transaction(request)

        return await self._make_api_call(
            "POST",
            self.settings.initialize_url,
            tx_ref=body["tx_ref"],
            body=body,
        )

    async def verify(self, reference: str) -> ApiResult:
        """
        Verify a payment transaction.

        See: https://developer.chapa.co/docs/verify-payments/

        Args:
            reference: Transaction reference (tx_ref) to verify

        Returns:
            Parsed API response with the reference attached as tx_ref

        Raises:
            ValidationError: reference is not a non-empty string
            ApiError: Chapa responded with a non-200 status
            TransportError: Network failure, timeout or non-JSON response
        """
        validate_reference(reference)

        return await self._make_api_call(
            "GET",
            f"{self.settings.verify_url}{quote(reference, safe='')}",
            tx_ref=reference,
        )

    async def _make_api_call(
        self,
        method: str,
        url: str,
        tx_ref: str,
        body: dict[str, Any] | None = None,
    ) -> ApiResult:
        """Send one request and map the response to a result or an error."""
        logger.info("chapa_request", method=method, url=url, tx_ref=tx_ref)

        try:
            response = await self.http_client.request(
                method,
                url,
                headers=self.headers,
                json=body,
            )
        except httpx.TimeoutException as e:
            logger.error("chapa_transport_error", url=url, tx_ref=tx_ref, error=str(e))
            raise TransportError("Chapa API timeout", tx_ref=tx_ref) from e
        except httpx.RequestError as e:
            logger.error("chapa_transport_error", url=url, tx_ref=tx_ref, error=str(e))
            raise TransportError(f"Chapa API request error: {e}", tx_ref=tx_ref) from e

        try:
            api_response = response.json()
        except ValueError as e:
            logger.error(
                "chapa_transport_error",
                url=url,
                tx_ref=tx_ref,
                status_code=response.status_code,
                error="non-JSON response body",
            )
            raise TransportError(
                f"Chapa API returned a non-JSON response (status: {response.status_code})",
                tx_ref=tx_ref,
            ) from e

        if not isinstance(api_response, dict):
            logger.error(
                "chapa_transport_error",
                url=url,
                tx_ref=tx_ref,
                status_code=response.status_code,
                error="response body is not a JSON object",
            )
            raise TransportError(
                f"Chapa API returned an unexpected response (status: {response.status_code})",
                tx_ref=tx_ref,
            )

        result = {**api_response, "tx_ref": tx_ref}

        if response.status_code != 200:
            logger.warning(
                "chapa_api_error",
                status_code=response.status_code,
                tx_ref=tx_ref,
            )
            raise ApiError(result, status_code=response.status_code, tx_ref=tx_ref)

        logger.info("chapa_request_success", tx_ref=tx_ref)
        return result

    async def __aenter__(self) -> "ChapaClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
