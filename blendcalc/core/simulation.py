from __future__ import annotations

import math
from typing import List, Optional

from blendcalc.core.profile import classify_profile
from blendcalc.domain.history import REFERENCE_TABLE, ReturnTable
from blendcalc.models import (
    EquityPoint,
    IncomeAssumptions,
    SimulationParameters,
    SimulationResult,
)


class SimulationOverflowError(ValueError):
    def __init__(self, year: int):
        super().__init__(
            f"balance is no longer a finite number in {year}; use a smaller initial capital"
        )
        self.year = year


def round_half_up(value: float) -> int:
    """Whole-unit rounding with ties going up (2.5 -> 3), as the calculator page displays it."""
    return int(math.floor(value + 0.5))


def blended_return(
    growth_weight_pct: int,
    growth_return_pct: float,
    income_return_pct: float,
) -> float:
    """Weighted sum of the two simple yearly returns, as a decimal (0.05 == 5%)."""
    income_weight_pct = 100 - growth_weight_pct
    return (growth_weight_pct / 100) * (growth_return_pct / 100) + (
        income_weight_pct / 100
    ) * (income_return_pct / 100)


def compound_annual_growth_rate(start: float, end: float, years: int) -> float:
    """Geometric mean yearly rate carrying `start` to `end` over `years`."""
    if start == 0:
        # degenerate zero-capital run: nothing ever grows
        return 0.0
    return (end / start) ** (1 / years) - 1


def project_future_value(capital: float, rate: float, years: int) -> float:
    """Constant-rate projection; past the float range this is math.inf."""
    if capital == 0:
        return 0.0
    try:
        return capital * (1 + rate) ** years
    except OverflowError:
        return math.inf


def monthly_income(balance: float, yield_pct: float) -> float:
    if yield_pct == 0:
        return 0.0
    return (balance * yield_pct / 100) / 12


def after_tax(amount: float, tax_rate: float) -> float:
    if tax_rate == 1:
        return 0.0
    return amount * (1 - tax_rate)


def blended_dividend_yield_pct(
    growth_weight_pct: int, assumptions: IncomeAssumptions
) -> float:
    income_weight_pct = 100 - growth_weight_pct
    return (growth_weight_pct / 100) * assumptions.growth_yield_pct + (
        income_weight_pct / 100
    ) * assumptions.income_yield_pct


def simulate(
    params: SimulationParameters,
    table: ReturnTable = REFERENCE_TABLE,
    assumptions: Optional[IncomeAssumptions] = None,
) -> SimulationResult:
    """
    Replay the historical table for one growth/income split.

    Order of operations (per historical year):
      1) Blend the two simple returns at the target weight (rebalanced yearly).
      2) Compound the balance at full precision.
      3) Track the running peak and the deepest drawdown from it.
      4) Record (year, rounded balance) on the equity curve.

    The curve opens with a synthetic row for the year before the first
    historical year holding initial_capital. A deposit benchmark compounds
    alongside at assumptions.savings_rate.

    CAGR, the optional forward projection and the income estimate are derived
    from the full-precision terminal balance.
    """
    assumptions = assumptions or IncomeAssumptions()

    capital = float(params.initial_capital)
    growth_weight = params.growth_weight_pct

    balance = capital
    peak_balance = capital
    max_drawdown = 0.0
    savings_balance = capital

    # the anchor row carries the capital as entered, unrounded
    curve: List[EquityPoint] = [
        EquityPoint(
            year=table.first_year - 1,
            balance=capital,
            savings=capital,
        )
    ]

    for row in table.rows:
        # 1) blended simple return for the year
        yearly = blended_return(growth_weight, row.growth_return_pct, row.income_return_pct)

        # 2) compound, no rounding until the curve is written
        balance *= 1 + yearly
        savings_balance *= 1 + assumptions.savings_rate
        if not (math.isfinite(balance) and math.isfinite(savings_balance)):
            raise SimulationOverflowError(row.year)

        # 3) drawdown from the running all-time high
        if balance > peak_balance:
            peak_balance = balance
        if peak_balance > 0:
            drawdown = (balance - peak_balance) / peak_balance
            if drawdown < max_drawdown:
                max_drawdown = drawdown

        # 4) record
        curve.append(
            EquityPoint(
                year=row.year,
                balance=round_half_up(balance),
                savings=round_half_up(savings_balance),
            )
        )

    years = len(table.rows)
    cagr = compound_annual_growth_rate(capital, balance, years)

    projected: Optional[float] = None
    if params.horizon_years is not None:
        projected = project_future_value(capital, cagr, params.horizon_years)

    dividend_yield_pct = blended_dividend_yield_pct(growth_weight, assumptions)

    # income is always read off the terminal balance, never an average
    income_base = projected if projected is not None else balance
    monthly = monthly_income(income_base, dividend_yield_pct)

    return SimulationResult(
        growth_weight_pct=growth_weight,
        income_weight_pct=params.income_weight_pct,
        equity_curve=tuple(curve),
        cagr=cagr,
        max_drawdown_pct=max_drawdown * 100,
        final_balance=curve[-1].balance,
        projected_future_value=projected,
        estimated_dividend_yield_pct=dividend_yield_pct,
        estimated_monthly_income=monthly,
        estimated_monthly_income_after_tax=after_tax(monthly, assumptions.tax_rate),
        savings_final_balance=curve[-1].savings,
        extra_profit=round_half_up(balance - savings_balance),
        profile=classify_profile(growth_weight),
    )


__all__ = [
    "SimulationOverflowError",
    "after_tax",
    "blended_return",
    "blended_dividend_yield_pct",
    "compound_annual_growth_rate",
    "monthly_income",
    "project_future_value",
    "round_half_up",
    "simulate",
]
