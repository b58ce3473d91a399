"""Fixed-point amount helpers."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .exceptions import InvalidAmountError

DEFAULT_SCALE = 8
DEFAULT_PRECISION = 18


def to_decimal(value: object) -> Decimal:
    """Coerce ``value`` to a finite ``Decimal`` without going through float math."""
    if isinstance(value, bool):
        raise InvalidAmountError(value, "Amount must be numeric")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(value, "Amount must be numeric") from exc
    else:
        raise InvalidAmountError(value, "Amount must be numeric")
    if not result.is_finite():
        raise InvalidAmountError(value, "Amount must be finite")
    return result


def quantize(value: Decimal, scale: int = DEFAULT_SCALE) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-scale))


def normalize_amount(
    value: object,
    *,
    scale: int = DEFAULT_SCALE,
    precision: int = DEFAULT_PRECISION,
    allow_zero: bool = False,
) -> Decimal:
    """Validate an operation amount and return it at the ledger scale.

    Amounts finer than ``scale`` fractional digits are rejected rather than
    rounded, as are amounts that do not fit ``precision`` total digits.
    """
    amount = to_decimal(value)
    if amount < 0 or (amount == 0 and not allow_zero):
        raise InvalidAmountError(value)
    exponent = amount.normalize().as_tuple().exponent
    if isinstance(exponent, int) and -exponent > scale:
        raise InvalidAmountError(value, f"Amount has more than {scale} fractional digits")
    if amount >= Decimal(10) ** (precision - scale):
        raise InvalidAmountError(value, f"Amount exceeds {precision - scale} integer digits")
    return quantize(amount, scale)


def format_amount(value: Decimal, scale: int = DEFAULT_SCALE) -> str:
    return format(quantize(value, scale), "f")
