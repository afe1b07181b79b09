"""Transaction domain models."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypedDict

# Parsed provider response, always annotated with the originating tx_ref.
ApiResult = dict[str, Any]


class TransactionRequest(TypedDict, total=False):
    """
    Payload for initializing a transaction.

    See: https://developer.chapa.co/docs/accept-payments/

    Any extra provider fields (phone_number, return_url, ...) may be passed
    alongside these keys; they are forwarded untouched.
    """

    amount: int | float
    currency: str
    email: str
    first_name: str
    last_name: str
    callback_url: str
    tx_ref: str
    customization: dict[str, Any]


class FieldType(str, Enum):
    """Semantic type expected for a request field."""

    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"

    def matches(self, value: Any) -> bool:
        """Return True if ``value`` is of this semantic type."""
        if self is FieldType.NUMBER:
            # bool is an int subclass but is not a number on the wire;
            # NaN and infinity have no JSON encoding
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            return isinstance(value, int) or math.isfinite(value)
        if self is FieldType.STRING:
            return isinstance(value, str)
        return isinstance(value, Mapping)


@dataclass(frozen=True)
class FieldRule:
    """Presence and type rule for a single request field."""

    name: str
    field_type: FieldType
    required: bool = True


TRANSACTION_FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("amount", FieldType.NUMBER),
    FieldRule("currency", FieldType.STRING),
    FieldRule("email", FieldType.STRING),
    FieldRule("first_name", FieldType.STRING),
    FieldRule("last_name", FieldType.STRING),
    FieldRule("callback_url", FieldType.STRING),
    FieldRule("customization", FieldType.OBJECT, required=False),
)


@dataclass(frozen=True)
class ClientOptions:
    """
    Per-call options for ``ChapaClient.initialize``.

    Attributes:
        auto_ref: Generate a ``tx_ref`` when the request does not supply one.
            When False, a missing ``tx_ref`` is a validation error.
    """

    auto_ref: bool = False
