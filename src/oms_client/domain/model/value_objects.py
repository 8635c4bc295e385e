"""Money and Quantity: the two validated scalars of an order line.

Both are frozen and compare by value. Raw user input never reaches them
directly; ``Quantity.parse`` is the gate between the two.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from oms_client.domain.exceptions import ValidationError

_INTEGER_TEXT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so a price read off the wire (``9.99``) is kept exactly
    as the back end sent it.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def to_wire(self) -> float:
        """JSON-number form expected by the back end."""
        return float(self.amount)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce a wire or user value (text, int, float) to Money."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A quantity the back end will accept: an integer above zero."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def parse(raw: object) -> Quantity | None:
        """Read a user-entered quantity, or None if it is not a positive integer.

        Accepts ints, integral floats and integer text ("3", " +3 ").
        Never raises: a draft may hold anything the user typed.
        """
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            value = raw
        elif isinstance(raw, float):
            if not raw.is_integer():
                return None
            value = int(raw)
        elif isinstance(raw, str):
            text = raw.strip()
            if not _INTEGER_TEXT.fullmatch(text):
                return None
            try:
                value = int(text)
            except ValueError:
                # longer than the interpreter's int conversion limit
                return None
        else:
            return None
        if value <= 0:
            return None
        return Quantity(value)
