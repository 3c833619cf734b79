"""Money value object and the truncating number formatter.

Amounts are held as Decimal so prices such as 7.95 + 24.95 add up to
exactly 32.90; the final figure is then truncated (never rounded up) to
two decimal places.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from cartpricing.domain.exceptions import ValidationError


def truncate(value: Decimal, decimals: int = 2) -> Decimal:
    """Cut *value* to *decimals* places toward zero.

    ``12.999 -> 12.99`` and ``-12.999 -> -12.99``: the magnitude is floored,
    the sign is kept.
    """
    if decimals < 0:
        raise ValidationError(f"Decimals must be >= 0, got {decimals}")
    exponent = Decimal(1).scaleb(-decimals)
    return Decimal(value).quantize(exponent, rounding=ROUND_DOWN)


def format_amount(
    value: Decimal | float | int | str,
    decimals: int = 2,
    dec_point: str = ".",
    thousands_sep: str = ",",
) -> str:
    """Truncate and render *value* as fixed-point text.

    >>> format_amount(Decimal("1234.567"))
    '1,234.56'
    """
    if isinstance(value, float):
        value = str(value)
    amount = truncate(Decimal(value), decimals)
    sign = "-" if amount < 0 else ""
    integer_part, _, fraction = f"{abs(amount):,.{decimals}f}".partition(".")
    text = integer_part.replace(",", thousands_sep)
    if decimals:
        text = f"{text}{dec_point}{fraction}"
    return sign + text


@dataclass(frozen=True)
class Money:
    """Signed monetary amount.

    Configured amounts (prices, reference prices, fees) go through
    ``non_negative()``; computed amounts may drop below zero when an offer
    takes off more than the cart is worth. Uses Decimal to avoid the
    binary floating-point error that would otherwise shift a truncated
    total by a cent.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        return Money(self.amount - other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def half(self) -> Money:
        return Money(self.amount / 2)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    def non_negative(self, label: str = "Money amount") -> Money:
        """Return self, or raise ValidationError if the amount is below zero."""
        if self.amount < Decimal("0"):
            raise ValidationError(f"{label} cannot be negative, got {self.amount}")
        return self

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        text = format_amount(self.amount)
        if text.startswith("-"):
            return f"-${text[1:]}"
        return f"${text}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Floats go through ``str()`` so ``32.95`` becomes ``Decimal("32.95")``
        rather than its binary approximation.
        """
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
