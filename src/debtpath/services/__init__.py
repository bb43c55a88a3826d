"""Service module exports."""

from . import advisor, budgeting, debts, formatting, planner, reports

__all__ = [
    "advisor",
    "budgeting",
    "debts",
    "formatting",
    "planner",
    "reports",
]
