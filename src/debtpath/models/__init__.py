"""Planner data model exports."""

from .debt import AVALANCHE, SNOWBALL, STRATEGIES, CashFlowItem, Debt, HistoryEntry
from .projection import PaymentRecord, Projection, ProjectionPoint, StrategyRecommendation

__all__ = [
    "AVALANCHE",
    "SNOWBALL",
    "STRATEGIES",
    "CashFlowItem",
    "Debt",
    "HistoryEntry",
    "PaymentRecord",
    "Projection",
    "ProjectionPoint",
    "StrategyRecommendation",
]
