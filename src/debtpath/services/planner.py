"""End-to-end debt freedom plan: budget, advice and projection in one call."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..config import BaseConfig
from ..logging_config import get_logger
from ..models.debt import AVALANCHE, CashFlowItem, Debt
from ..models.projection import Projection, StrategyRecommendation
from . import advisor, budgeting
from .debts import project, validate_debts, validate_strategy

logger = get_logger("services.planner")


@dataclass(slots=True)
class DebtFreedomPlan:
    """Everything a dashboard needs to render one household's plan."""

    summary: budgeting.HouseholdSummary
    recommendation: StrategyRecommendation | None
    strategy: str
    projection: Projection
    priority_debt: Debt | None
    suggested_payment: float | None
    currency: str | None = None

    @property
    def strategy_overridden(self) -> bool:
        return self.recommendation is not None and self.strategy != self.recommendation.recommended


def build_plan(
    debts: Iterable[Debt],
    incomes: Iterable[CashFlowItem] = (),
    expenses: Iterable[CashFlowItem] = (),
    *,
    strategy: str | None = None,
    today: date | None = None,
    config: BaseConfig | None = None,
) -> DebtFreedomPlan:
    """Recompute the full plan; switching strategy means calling this again.

    ``strategy`` overrides the advisor; without it the recommendation is used,
    and avalanche when there is nothing left to recommend.
    """

    config = config or BaseConfig()
    checked = validate_debts(debts)
    if strategy is not None:
        validate_strategy(strategy)

    summary = budgeting.summarize_household(checked, incomes, expenses)
    recommendation = advisor.recommend(checked, config=config)
    effective = strategy or (recommendation.recommended if recommendation else AVALANCHE)

    projection = project(
        checked,
        budgeting.monthly_budget(summary),
        effective,
        horizon_cap=config.HORIZON_MONTHS,
        min_extra_months=config.MIN_EXTRA_MONTHS,
        today=today,
        locale=config.LOCALE,
    )

    target = budgeting.priority_debt(checked, effective)
    payment = (
        budgeting.suggested_payment(target, summary.available_money) if target is not None else None
    )

    logger.info(
        "Plan built",
        extra={
            "strategy": effective,
            "recommended": recommendation.recommended if recommendation else None,
            "debt_free_month_index": projection.debt_free_month_index,
            "months_simulated": projection.months_simulated,
            "debts": len(checked),
        },
    )
    return DebtFreedomPlan(
        summary=summary,
        recommendation=recommendation,
        strategy=effective,
        projection=projection,
        priority_debt=target,
        suggested_payment=payment,
        currency=config.CURRENCY,
    )
