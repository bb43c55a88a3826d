"""Chart rendering for projections, payoff history and debt breakdowns."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Iterable, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
from matplotlib.figure import Figure

from ..models.debt import Debt
from ..models.projection import Projection
from .budgeting import PaidVsOwedPoint, debt_breakdown
from .formatting import format_currency
from .planner import DebtFreedomPlan

DEBT_COLOR = "#EF4444"
WEALTH_COLOR = "#22C55E"
DEFAULT_BAR_COLOR = "#6366F1"


def _currency_axis(axis, currency: str | None) -> None:
    axis.set_major_formatter(mticker.FuncFormatter(lambda x, p: format_currency(x)))
    if currency:
        axis.set_label_text(f"Amount ({currency})")


def _empty(ax, text: str) -> None:
    ax.text(0.5, 0.5, text, ha="center", va="center", fontsize=14, color="#666")
    ax.axis("off")


def build_projection_chart(projection: Projection, *, currency: str | None = None) -> Figure:
    """Debt (red) vs accumulated wealth (green) over the projected months."""

    points = projection.points
    fig, ax = plt.subplots(figsize=(10, 6))

    if len(points) > 1:
        x_vals = [p.index for p in points]
        debt = [p.total_debt for p in points]
        wealth = [p.wealth for p in points]

        ax.plot(x_vals, debt, color=DEBT_COLOR, linewidth=2.5, label="Remaining debt")
        ax.fill_between(x_vals, debt, color=DEBT_COLOR, alpha=0.25)
        ax.plot(x_vals, wealth, color=WEALTH_COLOR, linewidth=2.5, label="Accumulated wealth")
        ax.fill_between(x_vals, wealth, color=WEALTH_COLOR, alpha=0.25)
        ax.axhline(0, color="#475569", linewidth=1)

        if projection.is_debt_free:
            free_at = projection.debt_free_month_index
            ax.axvline(x=free_at, color=WEALTH_COLOR, linestyle="--", alpha=0.6, linewidth=1.5)
            ax.annotate(
                f"Debt free: {projection.debt_free_date:%b %Y}",
                (free_at, 0),
                xytext=(10, 30),
                textcoords="offset points",
                fontsize=10,
                fontweight="bold",
                color="#16A34A",
                arrowprops=dict(arrowstyle="->", color="#16A34A", alpha=0.6),
            )

        ax.grid(True, linestyle="--", alpha=0.3)
        ax.set_axisbelow(True)
        ax.set_title("Path to Financial Freedom", fontsize=14, fontweight="bold", pad=15)
        ax.set_xlabel("Month", fontsize=11)

        tick_step = max(1, len(x_vals) // 8)
        ax.set_xticks(x_vals[::tick_step])
        ax.set_xticklabels([p.label for p in points][::tick_step], rotation=45, ha="right")
        _currency_axis(ax.yaxis, currency)
        ax.legend(loc="upper right")

        textstr = (
            f"Monthly budget: {format_currency(projection.monthly_budget, currency)}\n"
            f"Months to freedom: {projection.debt_free_month_index}\n"
            f"Months simulated: {projection.months_simulated}"
        )
        props = dict(boxstyle="round", facecolor="#F3F4F6", alpha=0.8)
        ax.text(0.02, 0.98, textstr, transform=ax.transAxes, fontsize=9,
                verticalalignment="top", bbox=props)
    else:
        _empty(ax, "No debt to project")

    plt.tight_layout()
    return fig


def build_history_chart(
    points: Sequence[PaidVsOwedPoint], *, currency: str | None = None
) -> Figure:
    """Stacked paid vs still-owed areas for past snapshots."""

    fig, ax = plt.subplots(figsize=(10, 5))
    if points:
        x_vals = list(range(len(points)))
        paid = [p.paid for p in points]
        owed = [p.total_debt for p in points]
        ax.stackplot(
            x_vals,
            paid,
            owed,
            labels=["Paid", "Debt"],
            colors=[WEALTH_COLOR, DEBT_COLOR],
            alpha=0.4,
        )
        ax.set_xticks(x_vals)
        ax.set_xticklabels([p.label for p in points], rotation=45, ha="right")
        ax.set_title("History: Paid vs Owed", fontsize=14, fontweight="bold")
        _currency_axis(ax.yaxis, currency)
        ax.legend(loc="upper left")
        ax.grid(True, axis="y", linestyle="--", alpha=0.3)
    else:
        _empty(ax, "No history yet")

    plt.tight_layout()
    return fig


def build_breakdown_chart(debts: Iterable[Debt], *, currency: str | None = None) -> Figure:
    """Horizontal bars of the current balance per debt."""

    shares = debt_breakdown(debts)
    fig, ax = plt.subplots(figsize=(8, max(3, 0.6 * len(shares) + 1)))
    if shares:
        names = [s.name for s in shares]
        amounts = [s.amount for s in shares]
        colors = [s.color or DEFAULT_BAR_COLOR for s in shares]
        ax.barh(names, amounts, color=colors)
        ax.invert_yaxis()
        _currency_axis(ax.xaxis, currency)
        ax.set_title("Debt Distribution", fontsize=14, fontweight="bold")
    else:
        _empty(ax, "No debts")

    plt.tight_layout()
    return fig


def projection_chart_png(
    projection: Projection,
    output_path: Path | None = None,
    *,
    currency: str | None = None,
) -> Path:
    """Render the projection chart to PNG and return its path."""

    fig = build_projection_chart(projection, currency=currency)
    try:
        if output_path is None:
            with NamedTemporaryFile(delete=False, suffix=".png") as tmp:
                output_path = Path(tmp.name)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, bbox_inches="tight", dpi=100)
    finally:
        plt.close(fig)
    return output_path


def plan_chart_png(plan: DebtFreedomPlan, output_path: Path | None = None) -> Path:
    """Render a plan's projection in the plan's configured currency."""

    return projection_chart_png(plan.projection, output_path, currency=plan.currency)
