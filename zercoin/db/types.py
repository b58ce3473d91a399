"""Column types for fixed-point ledger amounts."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import BigInteger, Numeric
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

AMOUNT_PRECISION = 18
AMOUNT_SCALE = 8


class LedgerAmount(TypeDecorator):
    """DECIMAL(18, 8) that stays exact on every backend.

    Backends with a native decimal type get ``NUMERIC(18, 8)``. SQLite has
    none and would round-trip values through ``float``, so there the amount
    is stored as a 64-bit integer count of 10**-8 units.
    """

    impl = Numeric(AMOUNT_PRECISION, AMOUNT_SCALE, asdecimal=True)
    cache_ok = True

    _unit = Decimal(1).scaleb(-AMOUNT_SCALE)

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == "sqlite":
            return dialect.type_descriptor(BigInteger())
        return dialect.type_descriptor(Numeric(AMOUNT_PRECISION, AMOUNT_SCALE, asdecimal=True))

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        amount = Decimal(value) if not isinstance(value, Decimal) else value
        amount = amount.quantize(self._unit)
        if dialect.name == "sqlite":
            return int(amount.scaleb(AMOUNT_SCALE))
        return amount

    def process_result_value(self, value: Any, dialect: Dialect) -> Optional[Decimal]:
        if value is None:
            return None
        if dialect.name == "sqlite":
            return Decimal(int(value)).scaleb(-AMOUNT_SCALE).quantize(self._unit)
        return Decimal(value).quantize(self._unit)


__all__ = ["AMOUNT_PRECISION", "AMOUNT_SCALE", "LedgerAmount"]
