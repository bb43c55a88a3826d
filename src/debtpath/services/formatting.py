"""Display helpers shared by the advisor and the report charts."""

from __future__ import annotations


def format_currency(amount: float, currency: str | None = None) -> str:
    """Format whole currency units, e.g. ``$12,500`` or ``$12,500 MXN``."""

    prefix = "-" if amount < 0 else ""
    text = f"{prefix}${abs(amount):,.0f}"
    return f"{text} {currency}" if currency else text


def format_percent(value: float) -> str:
    return f"{value:.1f}%"
