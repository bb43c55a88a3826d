"""Household budget figures that feed the projection engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..errors import InvalidInputError
from ..logging_config import get_logger
from ..models.debt import SNOWBALL, CashFlowItem, Debt, HistoryEntry
from .debts import (
    active_debts,
    highest_interest_debt,
    lowest_balance_debt,
    validate_debts,
    validate_strategy,
)

logger = get_logger("services.budgeting")


@dataclass(slots=True)
class HouseholdSummary:
    """Totals shown next to the projection."""

    total_debt: float
    initial_total_debt: float
    total_income: float
    total_expenses: float
    total_min_payments: float

    @property
    def total_paid_off(self) -> float:
        return self.initial_total_debt - self.total_debt

    @property
    def remaining_pct(self) -> float:
        if self.initial_total_debt <= 0:
            return 0.0
        return self.total_debt / self.initial_total_debt * 100

    @property
    def progress_pct(self) -> float:
        if self.initial_total_debt <= 0:
            return 0.0
        return self.total_paid_off / self.initial_total_debt * 100

    @property
    def available_money(self) -> float:
        """Free cash flow left after expenses and every minimum payment."""

        return self.total_income - self.total_expenses - self.total_min_payments

    @property
    def payment_capacity(self) -> float:
        """Total monthly firepower against debt, minimums included."""

        return self.available_money + self.total_min_payments


@dataclass(slots=True)
class DebtShare:
    name: str
    amount: float
    color: str | None


@dataclass(slots=True)
class PaidVsOwedPoint:
    label: str
    total_debt: float
    paid: float


def _sum_items(items: Iterable[CashFlowItem], *, kind: str) -> float:
    total = 0.0
    for item in items:
        if not math.isfinite(item.amount) or item.amount < 0:
            raise InvalidInputError(
                f"{kind} {item.name!r} must be a finite amount >= 0.", field=kind
            )
        total += item.amount
    return total


def summarize_household(
    debts: Iterable[Debt],
    incomes: Iterable[CashFlowItem] = (),
    expenses: Iterable[CashFlowItem] = (),
) -> HouseholdSummary:
    """Compose the dashboard totals for the current debts and cash flow."""

    checked = validate_debts(debts)
    return HouseholdSummary(
        total_debt=sum(d.current_amount for d in checked),
        initial_total_debt=sum(d.initial_amount for d in checked),
        total_income=_sum_items(incomes, kind="income"),
        total_expenses=_sum_items(expenses, kind="expense"),
        total_min_payments=sum(d.min_payment for d in checked),
    )


def monthly_budget(summary: HouseholdSummary) -> float:
    """Budget handed to the engine; a negative capacity becomes zero."""

    capacity = summary.payment_capacity
    if capacity < 0:
        logger.warning(
            "Expenses exceed income; projecting with a zero payment budget",
            extra={"payment_capacity": round(capacity, 2)},
        )
        return 0.0
    return capacity


def priority_debt(debts: Iterable[Debt], strategy: str) -> Debt | None:
    """The debt the strategy attacks first right now."""

    validate_strategy(strategy)
    active = active_debts(validate_debts(debts))
    if not active:
        return None
    if strategy == SNOWBALL:
        return lowest_balance_debt(active)
    return highest_interest_debt(active)


def suggested_payment(debt: Debt, available_money: float) -> float:
    """Minimum plus every unit of free cash flow."""

    return debt.min_payment + max(available_money, 0.0)


def debt_breakdown(debts: Iterable[Debt]) -> list[DebtShare]:
    return [DebtShare(name=d.name, amount=d.current_amount, color=d.color) for d in debts]


def paid_vs_owed(
    history: Sequence[HistoryEntry],
    *,
    initial_total_debt: float,
    current_total_debt: float,
    today_label: str = "Today",
) -> list[PaidVsOwedPoint]:
    """Return past snapshots plus the current state as paid vs owed pairs."""

    points = [
        PaidVsOwedPoint(
            label=entry.label,
            total_debt=entry.total_debt,
            paid=max(0.0, initial_total_debt - entry.total_debt),
        )
        for entry in history
    ]
    points.append(
        PaidVsOwedPoint(
            label=today_label,
            total_debt=current_total_debt,
            paid=max(0.0, initial_total_debt - current_total_debt),
        )
    )
    return points
