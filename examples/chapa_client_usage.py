"""Example usage of ChapaClient.

Initializes a transaction with a generated reference and then verifies it.
Set CHAPA_SECRET_KEY (or put it in .env) before running.
"""

import asyncio

from chapa_client import (
    ApiError,
    ChapaClient,
    ChapaSettings,
    ClientOptions,
    TransportError,
    ValidationError,
    configure_logging_from_settings,
)


async def main() -> None:
    settings = ChapaSettings()
    configure_logging_from_settings(settings)

    async with ChapaClient.from_settings(settings) as client:
        try:
            result = await client.initialize(
                {
                    "amount": 100,
                    "currency": "ETB",
                    "email": "abebe@bikila.com",
                    "first_name": "Abebe",
                    "last_name": "Bikila",
                    "callback_url": "https://example.com/callback",
                    "customization": {
                        "title": "Payment",
                        "description": "Order 42",
                    },
                },
                ClientOptions(auto_ref=True),
            )
            print(f"Checkout URL: {result.get('data', {}).get('checkout_url')}")

            verification = await client.verify(result["tx_ref"])
            print(f"Verification status: {verification.get('status')}")

        except ValidationError as e:
            print(f"Invalid request:\n{e}")

        except ApiError as e:
            print(f"Chapa rejected {e.tx_ref} ({e.status_code}): {e.payload.get('message')}")

        except TransportError as e:
            print(f"Could not reach Chapa for {e.tx_ref}: {e}")


if __name__ == "__main__":
    asyncio.run(main())
