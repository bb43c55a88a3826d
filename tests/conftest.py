"""Pytest configuration and shared fixtures for debtpath tests.

Provides debt and cash-flow factories plus float helpers so projection tests
can build households without repeating every field.
"""

from __future__ import annotations

import logging
from datetime import date

import pytest

from debtpath.logging_config import ROOT_LOGGER_NAME
from debtpath.models import CashFlowItem, Debt

REFERENCE_DAY = date(2026, 1, 15)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory for creating test debts.

    Returns:
        Callable: Function that creates Debt instances with sensible defaults
    """

    counter = {"next": 1}

    def _create_debt(
        name: str | None = None,
        balance: float = 1000.00,
        rate: float | None = 18.0,
        min_payment: float = 25.00,
        initial: float | None = None,
        id: str | None = None,
        color: str | None = None,
    ) -> Debt:
        """Create a debt; ``initial`` defaults to the current balance."""

        number = counter["next"]
        counter["next"] += 1
        debt_id = id or f"debt-{number}"
        return Debt(
            id=debt_id,
            name=name or f"Debt {number}",
            initial_amount=balance if initial is None else initial,
            current_amount=balance,
            interest_rate=rate,
            min_payment=min_payment,
            color=color,
        )

    return _create_debt


@pytest.fixture
def household(debt_factory):
    """Two debts plus income and expenses that leave free cash flow."""

    debts = [
        debt_factory(name="Credit Card", balance=8000.0, initial=10000.0, rate=45.0, min_payment=200.0),
        debt_factory(name="Car Loan", balance=5000.0, initial=5000.0, rate=12.0, min_payment=100.0),
    ]
    incomes = [CashFlowItem("Salary A", 30000.0), CashFlowItem("Salary B", 5000.0)]
    expenses = [CashFlowItem("Rent", 12000.0), CashFlowItem("Groceries", 8000.0)]
    return debts, incomes, expenses


@pytest.fixture
def today() -> date:
    return REFERENCE_DAY


@pytest.fixture
def clean_logging():
    """Detach handlers installed by setup_logging once the test finishes."""

    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance (default one cent).

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
