"""Repayment strategy advisor."""

from __future__ import annotations

from typing import Iterable

from ..config import BaseConfig
from ..constants.messages import message
from ..logging_config import get_logger
from ..models.debt import AVALANCHE, SNOWBALL, Debt
from ..models.projection import StrategyRecommendation
from .debts import active_debts, highest_interest_debt, lowest_balance_debt, validate_debts
from .formatting import format_currency

logger = get_logger("services.advisor")


def recommend(
    debts: Iterable[Debt],
    *,
    locale: str | None = None,
    config: BaseConfig | None = None,
) -> StrategyRecommendation | None:
    """Suggest avalanche or snowball for the current debt set.

    Returns ``None`` when nothing is owed any more. The suggestion is only a
    default; callers may run the projection with the other strategy. With a
    ``config`` the balance quoted in a snowball reason carries its ``CURRENCY``.
    """

    high_interest_threshold = (
        config.HIGH_INTEREST_THRESHOLD if config else BaseConfig.HIGH_INTEREST_THRESHOLD
    )
    small_balance_threshold = (
        config.SMALL_BALANCE_THRESHOLD if config else BaseConfig.SMALL_BALANCE_THRESHOLD
    )
    if locale is None and config is not None:
        locale = config.LOCALE
    currency = config.CURRENCY if config else None

    active = active_debts(validate_debts(debts))
    if not active:
        return None

    max_interest = highest_interest_debt(active)
    min_balance = lowest_balance_debt(active)

    if max_interest.rate > high_interest_threshold:
        recommended = AVALANCHE
        reason = message("high_interest", locale, name=max_interest.name, rate=max_interest.rate)
    elif min_balance.current_amount < small_balance_threshold:
        recommended = SNOWBALL
        reason = message(
            "small_balance",
            locale,
            name=min_balance.name,
            balance=format_currency(min_balance.current_amount, currency),
        )
    else:
        recommended = AVALANCHE
        reason = message("math_default", locale)

    logger.debug(
        "Strategy recommended",
        extra={
            "recommended": recommended,
            "highest_interest_debt": max_interest.id,
            "lowest_balance_debt": min_balance.id,
        },
    )
    return StrategyRecommendation(
        recommended=recommended,
        reason=reason,
        highest_interest_debt=max_interest,
        lowest_balance_debt=min_balance,
    )
