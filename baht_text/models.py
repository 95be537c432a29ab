"""
Pydantic models for amounts — strict typing at the conversion boundary.

A monetary amount is never stored as words-ready parts by the caller. It is
split here, once, into sign / major / minor, and anything that doesn't fit
fails loudly before any word is produced.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import AmountValidationError

AmountLike = Union[Decimal, int, float, str]


# ─── Split Amount ────────────────────────────────────────────────────


class SplitAmount(BaseModel):
    """An amount split into sign, whole units and minor units (0..99)."""

    model_config = ConfigDict(frozen=True)

    negative: bool
    major: int = Field(ge=0)  # Whole units, unbounded
    minor: int = Field(ge=0, le=99)  # Truncated, never rounded

    @classmethod
    def from_value(cls, amount: AmountLike) -> SplitAmount:
        """Normalize ``amount`` and split it.

        The fraction is truncated toward zero to two digits, so 1.239 and
        -1.239 both give minor=23. An amount that truncates to zero
        (e.g. -0.001) is not negative.

        Raises:
            AmountValidationError: If the amount is None, a bool, unparseable,
                or not finite.
        """
        value = to_decimal(amount)

        # Exact rational arithmetic: no context precision, no magnitude limit
        numerator, denominator = value.copy_abs().as_integer_ratio()
        cents = numerator * 100 // denominator
        major, minor = divmod(cents, 100)

        return cls(negative=value < 0 and cents > 0, major=major, minor=minor)


def to_decimal(amount: AmountLike) -> Decimal:
    """Coerce a supported amount type to a finite Decimal."""
    if amount is None:
        raise AmountValidationError("Amount must not be None")
    if isinstance(amount, bool):
        raise AmountValidationError(
            f"Amount must be numeric, got bool {amount!r}", {"amount": amount}
        )

    if isinstance(amount, Decimal):
        value = amount
    else:
        try:
            # str() first so floats keep their shortest repr (0.1 → "0.1")
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise AmountValidationError(
                f"Could not parse amount: {amount!r}", {"amount": str(amount)}
            ) from None

    if not value.is_finite():
        raise AmountValidationError(
            f"Amount must be finite, got {value}", {"amount": str(value)}
        )
    return value
