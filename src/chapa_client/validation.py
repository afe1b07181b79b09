"""Request validation run before any call to the Chapa API."""

from collections.abc import Mapping
from typing import Any

import structlog

from chapa_client.models import (
    TRANSACTION_FIELD_RULES,
    ClientOptions,
    FieldRule,
    ValidationError,
)

logger = structlog.get_logger(__name__)

MISSING_TX_REF_MESSAGE = (
    "Field 'tx_ref' is required! or pass 'ClientOptions(auto_ref=True)' to the options"
)
INVALID_REFERENCE_MESSAGE = "Transaction reference must be a non-empty string!"


def check_field(request: Mapping[str, Any], rule: FieldRule) -> str | None:
    """Return the violation message for ``rule`` or None if the field is fine."""
    if rule.name not in request:
        if rule.required:
            return f"Field '{rule.name}' is required!"
        return None

    value = request[rule.name]
    if value is None and not rule.required:
        return None

    if not rule.field_type.matches(value):
        return f"Field '{rule.name}' must be of type '{rule.field_type.value}'."

    return None


def collect_violations(
    request: Mapping[str, Any],
    options: ClientOptions,
    rules: tuple[FieldRule, ...] = TRANSACTION_FIELD_RULES,
) -> list[str]:
    """
    Evaluate every rule against the request.

    Rules never short-circuit: each field is checked independently and the
    violations come back in rule order, followed by the tx_ref check.
    """
    errors = [message for rule in rules if (message := check_field(request, rule))]

    if not options.auto_ref and not request.get("tx_ref"):
        errors.append(MISSING_TX_REF_MESSAGE)

    return errors


def validate_transaction(request: Any, options: ClientOptions | None = None) -> None:
    """
    Validate an initialize request.

    Args:
        request: Caller-supplied transaction request mapping
        options: Client options (auto_ref controls whether tx_ref is required)

    Raises:
        ValidationError: With every violation joined into one message
    """
    options = options or ClientOptions()

    if not isinstance(request, Mapping):
        raise ValidationError("Transaction request must be a mapping of fields!")

    errors = collect_violations(request, options)
    if errors:
        logger.warning("chapa_validation_failed", violation_count=len(errors))
        raise ValidationError(errors)


def validate_reference(reference: Any) -> None:
    """
    Validate a transaction reference passed to verify.

    Raises:
        ValidationError: If reference is not a non-empty string, or is a
            "." or ".." path segment
    """
    # "." and ".." are dot segments that would be collapsed out of the URL path
    if not isinstance(reference, str) or reference in ("", ".", ".."):
        logger.warning("chapa_validation_failed", violation_count=1)
        raise ValidationError(INVALID_REFERENCE_MESSAGE)
