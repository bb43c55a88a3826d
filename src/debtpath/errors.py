"""Exceptions raised at the planner boundary."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when debts, budgets or options violate the caller contract.

    Raised before any simulation work starts, so no partial result is ever
    returned alongside it.
    """

    def __init__(self, message: str, *, field: str | None = None, debt_id: str | None = None):
        super().__init__(message)
        self.field = field
        self.debt_id = debt_id
