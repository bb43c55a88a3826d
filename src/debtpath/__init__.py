"""Household debt payoff planner: strategy advice and month-by-month projections."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .errors import InvalidInputError
from .models import CashFlowItem, Debt, Projection, StrategyRecommendation
from .services.advisor import recommend
from .services.debts import project
from .services.planner import DebtFreedomPlan, build_plan

__all__ = [
    "BaseConfig",
    "DevConfig",
    "InvalidInputError",
    "CashFlowItem",
    "Debt",
    "Projection",
    "StrategyRecommendation",
    "recommend",
    "project",
    "DebtFreedomPlan",
    "build_plan",
]
