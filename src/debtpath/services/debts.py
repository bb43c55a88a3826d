"""Debt payoff projection engine (snowball and avalanche).

One call to :func:`project` simulates the household month by month:

1. interest accrues on every positive balance,
2. minimum payments are made in input order out of the monthly budget,
3. whatever is left goes entirely to one target debt picked by the strategy,
4. once every balance is zero the unspent budget accumulates as wealth.

Caller debts are never mutated; the engine works on a private copy of the
balances and returns new, immutable :class:`Projection` objects.
"""

from __future__ import annotations

import math
from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from ..constants.messages import message
from ..errors import InvalidInputError
from ..logging_config import get_logger
from ..models.debt import AVALANCHE, SNOWBALL, STRATEGIES, Debt
from ..models.projection import PaymentRecord, Projection, ProjectionPoint

logger = get_logger("services.debts")

DEFAULT_HORIZON_MONTHS = 60
DEFAULT_MIN_EXTRA_MONTHS = 12


@dataclass(slots=True)
class SimulationState:
    """Working state of a single projection run."""

    month: int
    balances: dict[str, float]
    accumulated_wealth: float = 0.0
    total_interest: float = 0.0
    degraded_months: list[int] = field(default_factory=list)

    @property
    def total_debt(self) -> float:
        return sum(self.balances.values())


def _round_half_up(value: float) -> int:
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def add_months(start: date, months: int) -> date:
    """Return ``start`` shifted by whole calendar months, clamping the day."""

    month = start.month + months
    year = start.year + (month - 1) // 12
    month = ((month - 1) % 12) + 1
    day = min(start.day, monthrange(year, month)[1])
    return date(year, month, day)


def validate_strategy(strategy: str) -> str:
    if strategy not in STRATEGIES:
        raise InvalidInputError(
            f"Invalid debt payoff strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}.",
            field="strategy",
        )
    return strategy


def validate_debts(debts: Iterable[Debt]) -> list[Debt]:
    """Return the debts as a list after checking the caller contract."""

    checked: list[Debt] = []
    seen: set[str] = set()
    for debt in debts:
        if not isinstance(debt, Debt):
            raise InvalidInputError(f"Expected a Debt, got {type(debt).__name__}.")
        if debt.id in seen:
            raise InvalidInputError(f"Duplicate debt id {debt.id!r}.", field="id", debt_id=debt.id)
        seen.add(debt.id)
        for name in ("initial_amount", "current_amount", "min_payment", "interest_rate"):
            value = getattr(debt, name)
            if value is None and name == "interest_rate":
                continue
            if not math.isfinite(value):
                raise InvalidInputError(
                    f"{name} must be finite for debt {debt.id!r}.", field=name, debt_id=debt.id
                )
            if value < 0:
                raise InvalidInputError(
                    f"{name} must be >= 0 for debt {debt.id!r}.", field=name, debt_id=debt.id
                )
        checked.append(debt)
    return checked


def active_debts(debts: Iterable[Debt]) -> list[Debt]:
    return [debt for debt in debts if debt.is_active]


def highest_interest_debt(debts: Sequence[Debt]) -> Debt | None:
    """Debt with the highest rate; ties go to the first one in input order."""

    best: Debt | None = None
    for debt in debts:
        if best is None or debt.rate > best.rate:
            best = debt
    return best


def lowest_balance_debt(debts: Sequence[Debt]) -> Debt | None:
    """Debt with the smallest balance; ties go to the first one in input order."""

    best: Debt | None = None
    for debt in debts:
        if best is None or debt.current_amount < best.current_amount:
            best = debt
    return best


def _select_target(debts: Sequence[Debt], balances: dict[str, float], strategy: str) -> Debt | None:
    """Pick the single debt that receives this month's leftover budget."""

    target: Debt | None = None
    for debt in debts:
        balance = balances[debt.id]
        if balance <= 0:
            continue
        if target is None:
            target = debt
        elif strategy == SNOWBALL and balance < balances[target.id]:
            target = debt
        elif strategy == AVALANCHE and debt.rate > target.rate:
            target = debt
    return target


def _simulate_month(
    state: SimulationState, debts: Sequence[Debt], monthly_budget: float, strategy: str
) -> list[PaymentRecord]:
    state.month += 1
    budget = monthly_budget
    interest_by_debt = dict.fromkeys(state.balances, 0.0)
    minimum_by_debt = dict.fromkeys(state.balances, 0.0)
    extra_by_debt = dict.fromkeys(state.balances, 0.0)
    was_active = {debt_id for debt_id, balance in state.balances.items() if balance > 0}

    for debt in debts:
        balance = state.balances[debt.id]
        if balance > 0 and debt.rate > 0:
            interest = balance * (debt.rate / 100) / 12
            state.balances[debt.id] = balance + interest
            state.total_interest += interest
            interest_by_debt[debt.id] = interest

    # Under-funded budgets pay minimums first come, first served.
    degraded = False
    for debt in debts:
        balance = state.balances[debt.id]
        if balance <= 0:
            continue
        due = min(balance, debt.min_payment)
        payment = min(due, budget)
        if payment < due:
            degraded = True
        state.balances[debt.id] = balance - payment
        minimum_by_debt[debt.id] = payment
        budget -= payment
    if degraded:
        state.degraded_months.append(state.month)

    if budget > 0:
        target = _select_target(debts, state.balances, strategy)
        if target is not None:
            extra = min(state.balances[target.id], budget)
            state.balances[target.id] -= extra
            extra_by_debt[target.id] = extra
            budget -= extra
        else:
            state.accumulated_wealth += budget
            budget = 0.0

    if state.total_debt == 0 and budget > 0:
        state.accumulated_wealth += budget

    return [
        PaymentRecord(
            month=state.month,
            debt_id=debt.id,
            interest=interest_by_debt[debt.id],
            minimum_paid=minimum_by_debt[debt.id],
            extra_paid=extra_by_debt[debt.id],
            remaining_balance=state.balances[debt.id],
        )
        for debt in debts
        if debt.id in was_active
    ]


def _point(state: SimulationState, locale: str | None) -> ProjectionPoint:
    label = message("today", locale) if state.month == 0 else message("month", locale, n=state.month)
    return ProjectionPoint(
        label=label,
        total_debt=max(0, _round_half_up(state.total_debt)),
        wealth=_round_half_up(state.accumulated_wealth),
        index=state.month,
    )


def project(
    debts: Iterable[Debt],
    monthly_budget: float,
    strategy: str,
    *,
    horizon_cap: int = DEFAULT_HORIZON_MONTHS,
    min_extra_months: int = DEFAULT_MIN_EXTRA_MONTHS,
    today: date | None = None,
    locale: str | None = None,
) -> Projection:
    """Simulate monthly payoff and post-debt wealth for ``debts``.

    Args:
        debts: Snapshot of the household debts; never mutated.
        monthly_budget: Total monthly firepower (minimums plus free cash flow).
        strategy: ``"avalanche"`` or ``"snowball"``.
        horizon_cap: Hard stop, in simulated months.
        min_extra_months: Keep simulating until at least this month so the
            wealth trend is visible after payoff.
        today: Reference date for ``debt_free_date``; defaults to the current date.
        locale: Language of the point labels.

    Raises:
        InvalidInputError: negative or non-finite amounts, unknown strategy or bad options.
    """

    checked = validate_debts(debts)
    validate_strategy(strategy)
    if not math.isfinite(monthly_budget) or monthly_budget < 0:
        raise InvalidInputError(
            "monthly_budget must be a finite amount >= 0.", field="monthly_budget"
        )
    if horizon_cap < 0 or min_extra_months < 0:
        raise InvalidInputError(
            "horizon_cap and min_extra_months must be >= 0.", field="horizon_cap"
        )
    start = today or date.today()

    state = SimulationState(
        month=0, balances={debt.id: float(debt.current_amount) for debt in checked}
    )
    points = [_point(state, locale)]
    payments: list[PaymentRecord] = []

    if state.total_debt <= 0:
        logger.debug("Nothing to project; all balances are zero", extra={"debts": len(checked)})
        return Projection(
            points=tuple(points),
            debt_free_month_index=0,
            debt_free_date=start,
            strategy=strategy,
            monthly_budget=monthly_budget,
        )

    while (state.total_debt > 0 or state.month < min_extra_months) and state.month < horizon_cap:
        payments.extend(_simulate_month(state, checked, monthly_budget, strategy))
        points.append(_point(state, locale))

    debt_free_index = next(
        (point.index for point in points if point.total_debt == 0), horizon_cap
    )
    if state.degraded_months:
        logger.warning(
            "Monthly budget does not cover all minimum payments",
            extra={
                "monthly_budget": monthly_budget,
                "first_degraded_month": state.degraded_months[0],
                "degraded_months": len(state.degraded_months),
            },
        )
    logger.debug(
        "Projection complete",
        extra={
            "strategy": strategy,
            "months": state.month,
            "debt_free_month_index": debt_free_index,
        },
    )

    return Projection(
        points=tuple(points),
        debt_free_month_index=debt_free_index,
        debt_free_date=add_months(start, debt_free_index),
        strategy=strategy,
        monthly_budget=monthly_budget,
        total_interest=float(
            Decimal(repr(state.total_interest)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        ),
        degraded_months=tuple(state.degraded_months),
        payments=tuple(payments),
    )


def snowball_projection(debts: Iterable[Debt], monthly_budget: float, **options) -> Projection:
    """Return a projection that targets the smallest balance first."""

    return project(debts, monthly_budget, SNOWBALL, **options)


def avalanche_projection(debts: Iterable[Debt], monthly_budget: float, **options) -> Projection:
    """Return a projection that targets the highest interest rate first."""

    return project(debts, monthly_budget, AVALANCHE, **options)
