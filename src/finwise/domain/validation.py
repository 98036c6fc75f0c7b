"""Input validation shared by ledger mutations."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterable

from finwise.domain.entities import PaymentMethod
from finwise.domain.errors import ValidationError, negative_balance
from finwise.utils.amount_parser import parse_amount


def to_money(value: Decimal | int | str, field_name: str = "amount") -> Decimal:
    """Coerce a monetary input to Decimal without passing through float.

    Raises:
        ValidationError: If the value is a float, bool, non-finite, or unparseable
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise ValidationError(
            f"{field_name} must be a Decimal, int or decimal string, not {type(value).__name__}"
        )
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValidationError(f"{field_name} must be a finite number")
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        try:
            return parse_amount(value)
        except ValueError as e:
            raise ValidationError(f"Invalid {field_name}: {e}") from e
    raise ValidationError(f"Unsupported {field_name} type: {type(value).__name__}")


def require_text(value: str, field_name: str) -> str:
    """Return value stripped, rejecting empty strings."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be a non-empty string")
    return value.strip()


def require_non_negative_balance(value: Decimal | int | str) -> Decimal:
    balance = to_money(value, "balance")
    if balance < 0:
        raise ValidationError(negative_balance(balance))
    return balance


def require_positive_amount(value: Decimal | int | str) -> Decimal:
    amount = to_money(value, "amount")
    if amount <= 0:
        raise ValidationError(f"Transaction amount must be greater than zero (got {amount})")
    return amount


def require_distinct_parties(from_party_id: int, to_party_id: int) -> None:
    if from_party_id == to_party_id:
        raise ValidationError(
            f"Transaction cannot move money from party {from_party_id} to itself"
        )


def parse_payment_method(value: PaymentMethod | str) -> PaymentMethod:
    """Resolve a payment method from the enum or its string value.

    Accepts the stored value ("credit_card") as well as the spaced form
    ("credit card"), case-insensitively.
    """
    if isinstance(value, PaymentMethod):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return PaymentMethod(normalized)
        except ValueError:
            pass
    allowed = ", ".join(m.value for m in PaymentMethod)
    raise ValidationError(f"Unknown payment method '{value}'. Expected one of: {allowed}")


def require_receipt_moment(receipt_date: date, receipt_time: time) -> None:
    # datetime is a date subclass; reject it so the time is not silently dropped
    if not isinstance(receipt_date, date) or isinstance(receipt_date, datetime):
        raise ValidationError("Receipt date must be a date")
    if not isinstance(receipt_time, time):
        raise ValidationError("Receipt time must be a time")


def normalize_items(items: Iterable[str] | None) -> tuple[str, ...]:
    """Return receipt items as a tuple, preserving order."""
    if items is None:
        return ()
    if isinstance(items, str):
        raise ValidationError("Receipt items must be a sequence of strings, not a string")
    normalized = tuple(items)
    for item in normalized:
        if not isinstance(item, str):
            raise ValidationError(f"Receipt item {item!r} is not a string")
    return normalized
