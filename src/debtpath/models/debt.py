"""Debt and cash-flow inputs supplied by the surrounding application."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..errors import InvalidInputError

AVALANCHE = "avalanche"
SNOWBALL = "snowball"
STRATEGIES = (AVALANCHE, SNOWBALL)

# Caller records may use the camelCase names of the original data store.
_FIELD_ALIASES = {
    "initial_amount": ("initial_amount", "initialAmount"),
    "current_amount": ("current_amount", "currentAmount"),
    "interest_rate": ("interest_rate", "interestRate"),
    "min_payment": ("min_payment", "minPayment"),
}


def _coerce_amount(value: Any, *, field: str, debt_id: str | None) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number.", field=field, debt_id=debt_id)
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"{field} must be a number, got {value!r}.", field=field, debt_id=debt_id
        ) from exc
    if math.isnan(amount) or math.isinf(amount):
        raise InvalidInputError(f"{field} must be finite.", field=field, debt_id=debt_id)
    return amount


@dataclass(frozen=True, slots=True)
class Debt:
    """Immutable snapshot of one household debt.

    ``interest_rate`` is a nominal annual percentage (``18.0`` means 18%).
    ``color`` is carried for charts and ignored by every calculation.
    """

    id: str
    name: str
    initial_amount: float
    current_amount: float
    interest_rate: Optional[float] = None
    min_payment: float = 0.0
    color: Optional[str] = None

    @property
    def rate(self) -> float:
        """Annual rate with a missing value treated as zero."""

        return self.interest_rate or 0.0

    @property
    def is_active(self) -> bool:
        return self.current_amount > 0

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "Debt":
        """Build a debt from a caller record (snake_case or camelCase keys)."""

        raw_id = row.get("id")
        name = row.get("name")
        if raw_id is None and name is None:
            raise InvalidInputError("Debt record needs an id or a name.", field="id")
        debt_id = str(raw_id if raw_id is not None else name)

        values: dict[str, Any] = {}
        for field, keys in _FIELD_ALIASES.items():
            present = [row[key] for key in keys if key in row]
            values[field] = present[0] if present else None

        if values["current_amount"] is None:
            raise InvalidInputError(
                "Debt record is missing current_amount.", field="current_amount", debt_id=debt_id
            )
        current = _coerce_amount(values["current_amount"], field="current_amount", debt_id=debt_id)
        initial = (
            current
            if values["initial_amount"] is None
            else _coerce_amount(values["initial_amount"], field="initial_amount", debt_id=debt_id)
        )
        rate = (
            None
            if values["interest_rate"] is None
            else _coerce_amount(values["interest_rate"], field="interest_rate", debt_id=debt_id)
        )
        minimum = (
            0.0
            if values["min_payment"] is None
            else _coerce_amount(values["min_payment"], field="min_payment", debt_id=debt_id)
        )

        return cls(
            id=debt_id,
            name=str(name if name is not None else debt_id),
            initial_amount=initial,
            current_amount=current,
            interest_rate=rate,
            min_payment=minimum,
            color=row.get("color"),
        )


@dataclass(frozen=True, slots=True)
class CashFlowItem:
    """A recurring monthly income or expense line."""

    name: str
    amount: float


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """A past snapshot of the household's total debt."""

    label: str
    total_debt: float
