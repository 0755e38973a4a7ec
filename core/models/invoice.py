"""Invoice domain models.

Amounts are stored in cents (integer) to avoid floating point issues.
$10.50 = 1050 cents. Form input carries dollars as a decimal string.
"""

from decimal import Decimal, InvalidOperation, Overflow, ROUND_HALF_UP
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


CUSTOMER_REQUIRED = "Please select a customer"
AMOUNT_INVALID = "Please enter a valid amount."
AMOUNT_NOT_POSITIVE = "Please enter an amount greater than $0."
STATUS_REQUIRED = "Please select an invoice status"


class InvoiceStatus(str, Enum):
    """Invoice payment status."""

    PENDING = "pending"
    PAID = "paid"


def to_cents(amount: Decimal) -> int:
    """Dollars to integer cents, rounding half-up on sub-cent input."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class InvoiceForm(BaseModel):
    """
    Create/update invoice form input.

    Only customerId, amount and status are accepted; id and date are never
    taken from the submission. Every field validates independently so a bad
    submission reports all offending fields at once.
    """

    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(None, alias="customerId", validate_default=True)
    amount: Decimal = Field(None, validate_default=True)
    status: InvoiceStatus = Field(None, validate_default=True)

    @field_validator("customer_id", mode="before")
    @classmethod
    def require_customer(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("customer_required", CUSTOMER_REQUIRED)
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Decimal:
        """
        Explicit string-to-Decimal coercion.

        Missing or blank input counts as 0. Anything that does not parse to a
        finite number is rejected rather than silently becoming NaN.
        """
        if value is None:
            value = "0"
        if isinstance(value, bool):
            raise PydanticCustomError("amount_invalid", AMOUNT_INVALID)
        if isinstance(value, str):
            value = value.strip() or "0"

        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise PydanticCustomError("amount_invalid", AMOUNT_INVALID)

        if not amount.is_finite():
            raise PydanticCustomError("amount_invalid", AMOUNT_INVALID)

        if amount <= 0:
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)

        # Past decimal precision, cents can no longer be represented
        try:
            cents = to_cents(amount)
        except (InvalidOperation, Overflow):
            raise PydanticCustomError("amount_invalid", AMOUNT_INVALID)

        if cents <= 0:
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)

        return amount

    @field_validator("status", mode="before")
    @classmethod
    def require_status(cls, value: Any) -> str:
        if value not in {s.value for s in InvoiceStatus}:
            raise PydanticCustomError("status_required", STATUS_REQUIRED)
        return value

    @property
    def amount_in_cents(self) -> int:
        return to_cents(self.amount)
