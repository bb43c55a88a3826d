"""Engine-owned outputs: projection series and strategy recommendations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .debt import Debt


@dataclass(frozen=True, slots=True)
class ProjectionPoint:
    """One month of the debt vs wealth series (index 0 is today)."""

    label: str
    total_debt: int
    wealth: int
    index: int


@dataclass(frozen=True, slots=True)
class PaymentRecord:
    """What one debt received in one simulated month."""

    month: int
    debt_id: str
    interest: float
    minimum_paid: float
    extra_paid: float
    remaining_balance: float

    @property
    def total_paid(self) -> float:
        return self.minimum_paid + self.extra_paid


@dataclass(frozen=True, slots=True)
class Projection:
    """Result of a single projection run."""

    points: tuple[ProjectionPoint, ...]
    debt_free_month_index: int
    debt_free_date: date
    strategy: str
    monthly_budget: float
    total_interest: float = 0.0
    degraded_months: tuple[int, ...] = ()
    payments: tuple[PaymentRecord, ...] = ()

    def payments_for_month(self, month: int) -> dict[str, PaymentRecord]:
        return {record.debt_id: record for record in self.payments if record.month == month}

    @property
    def months_simulated(self) -> int:
        return self.points[-1].index if self.points else 0

    @property
    def is_debt_free(self) -> bool:
        """Whether the payoff happens inside the simulated horizon."""

        return any(point.total_debt == 0 for point in self.points)

    @property
    def final_wealth(self) -> int:
        return self.points[-1].wealth if self.points else 0


@dataclass(frozen=True, slots=True)
class StrategyRecommendation:
    """Default strategy suggestion; callers may override it."""

    recommended: str
    reason: str
    highest_interest_debt: Debt
    lowest_balance_debt: Debt
