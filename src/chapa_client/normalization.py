"""Normalization of validated initialize requests."""

import uuid
from collections.abc import Mapping
from typing import Any


def generate_tx_ref() -> str:
    """Generate a fresh random (version 4) transaction reference."""
    return str(uuid.uuid4())


def normalize_transaction(request: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build the effective request body sent to the initialize endpoint.

    Customization keys are flattened into the top level and override
    existing keys of the same name. The merge happens before tx_ref is
    resolved, so a customization tx_ref takes precedence. A missing or
    empty tx_ref is replaced with a newly generated one.

    The input mapping is not modified.
    """
    body = dict(request)

    customization = body.pop("customization", None)
    if isinstance(customization, Mapping):
        body.update(customization)

    body["tx_ref"] = body.get("tx_ref") or generate_tx_ref()
    return body
