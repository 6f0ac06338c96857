from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class AnnualReturn(BaseModel):
    """One calendar year of observed returns, as signed percentages (19.18 == +19.18%)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    growth_return_pct: float = Field(ge=-100, allow_inf_nan=False)
    income_return_pct: float = Field(ge=-100, allow_inf_nan=False)


class SimulationParameters(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    growth_weight_pct: int = Field(ge=0, le=100)
    # zero is allowed here and produces a flat all-zero curve
    initial_capital: float = Field(ge=0, allow_inf_nan=False)
    horizon_years: Optional[int] = Field(default=None, ge=1)

    @computed_field  # type: ignore[misc]
    @property
    def income_weight_pct(self) -> int:
        return 100 - self.growth_weight_pct


class IncomeAssumptions(BaseModel):
    """
    Exogenous long-run assumptions used for the income estimate.

    Yields are annual cash-yield percentages per instrument, tax_rate and
    savings_rate are decimals (0.15 == 15%). savings_rate drives the plain
    deposit benchmark curve.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    growth_yield_pct: float = Field(default=0.6, ge=0, allow_inf_nan=False)
    income_yield_pct: float = Field(default=3.4, ge=0, allow_inf_nan=False)
    tax_rate: float = Field(default=0.15, ge=0, le=1, allow_inf_nan=False)
    savings_rate: float = Field(default=0.035, ge=-1, allow_inf_nan=False)


class EquityPoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    balance: float
    savings: float


class InvestorProfile(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    title: str
    description: str


class SimulationResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    growth_weight_pct: int
    income_weight_pct: int

    # one synthetic anchor row holding the capital as entered, then one
    # whole-unit row per historical year
    equity_curve: Tuple[EquityPoint, ...]

    cagr: float
    max_drawdown_pct: float = Field(le=0)
    final_balance: float
    projected_future_value: Optional[float] = None

    estimated_dividend_yield_pct: float
    estimated_monthly_income: float
    estimated_monthly_income_after_tax: float

    savings_final_balance: float
    extra_profit: int

    profile: InvestorProfile
