"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from labelkit.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "OMR"
LABEL_PRICE_DECIMALS = 3

CODE_LENGTH = 13
PAYLOAD_LENGTH = CODE_LENGTH - 1


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors. Prices on
    labels are always shown with three decimals (baisa precision).
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Display --------------------------------------------------------------

    def label(self) -> str:
        """Price text as printed on a label, e.g. ``1.500 OMR``."""
        return f"{self.amount:.{LABEL_PRICE_DECIMALS}f} {self.currency}"

    def __str__(self) -> str:
        return self.label()

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY
    ) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class BarcodeCode:
    """A 13-digit code: 12 payload digits followed by one checksum digit.

    The checksum relation is checked on construction, so a BarcodeCode
    that exists is always scannable by tooling using the 1/3 weighting.
    """

    value: str

    def __post_init__(self) -> None:
        # Imported here to keep value_objects free of a module-level cycle.
        from labelkit.domain.service.code_generator import checksum_digit

        if not isinstance(self.value, str):
            raise ValidationError(
                f"Barcode must be a string, got {type(self.value).__name__}"
            )
        if len(self.value) != CODE_LENGTH or not _is_ascii_digits(self.value):
            raise ValidationError(
                f"Barcode must be exactly {CODE_LENGTH} digits, got {self.value!r}"
            )
        expected = checksum_digit(self.value[:PAYLOAD_LENGTH])
        if int(self.value[-1]) != expected:
            raise ValidationError(
                f"Barcode {self.value} has check digit {self.value[-1]}, "
                f"expected {expected}"
            )

    @property
    def payload(self) -> str:
        return self.value[:PAYLOAD_LENGTH]

    @property
    def check_digit(self) -> int:
        return int(self.value[-1])

    def __str__(self) -> str:
        return self.value


def _is_ascii_digits(text: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits
    return all("0" <= ch <= "9" for ch in text)
