"""Data contracts for the simulation endpoint."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from blendcalc.domain.history import Holding, ReturnTable
from blendcalc.models import SimulationParameters, SimulationResult

# keeps every run of the reference table well inside float range
MAX_INITIAL_CAPITAL = 1e15


class SimulationRequest(BaseModel):
    """Inputs collected by the calculator page for one run."""

    model_config = ConfigDict(extra="forbid")

    growthWeightPct: int = Field(
        ...,
        ge=0,
        le=100,
        description="Share of capital in the growth fund, in whole percent.",
    )
    initialCapital: float = Field(
        ...,
        gt=0,
        le=MAX_INITIAL_CAPITAL,
        allow_inf_nan=False,
        description="Starting amount, any currency unit.",
    )
    horizonYears: Optional[int] = Field(
        None,
        ge=1,
        description="Years to project forward at the historical CAGR.",
    )

    def to_parameters(self) -> SimulationParameters:
        return SimulationParameters(
            growth_weight_pct=self.growthWeightPct,
            initial_capital=self.initialCapital,
            horizon_years=self.horizonYears,
        )


class EquityPointOut(BaseModel):
    year: int
    value: float
    savings: float


class ProfileOut(BaseModel):
    key: str
    title: str
    description: str


class SimulationResponse(BaseModel):
    """
    Everything the page renders for one run.

    A projection past the float range serializes as the string "Infinity".
    """

    model_config = ConfigDict(ser_json_inf_nan="strings")

    growthWeightPct: int
    incomeWeightPct: int
    chartData: List[EquityPointOut]
    cagr: float
    maxDrawdownPct: float
    finalBalance: float
    projectedFutureValue: Optional[float] = None
    estimatedDividendYieldPct: float
    estimatedMonthlyIncome: float
    estimatedMonthlyIncomeAfterTax: float
    savingsFinalBalance: float
    extraProfit: int
    profile: ProfileOut

    @classmethod
    def from_result(cls, result: SimulationResult) -> "SimulationResponse":
        return cls(
            growthWeightPct=result.growth_weight_pct,
            incomeWeightPct=result.income_weight_pct,
            chartData=[
                EquityPointOut(year=point.year, value=point.balance, savings=point.savings)
                for point in result.equity_curve
            ],
            cagr=result.cagr,
            maxDrawdownPct=result.max_drawdown_pct,
            finalBalance=result.final_balance,
            projectedFutureValue=result.projected_future_value,
            estimatedDividendYieldPct=result.estimated_dividend_yield_pct,
            estimatedMonthlyIncome=result.estimated_monthly_income,
            estimatedMonthlyIncomeAfterTax=result.estimated_monthly_income_after_tax,
            savingsFinalBalance=result.savings_final_balance,
            extraProfit=result.extra_profit,
            profile=ProfileOut(**result.profile.model_dump()),
        )


class AnnualReturnOut(BaseModel):
    year: int
    growthReturnPct: float
    incomeReturnPct: float


class ReturnTableResponse(BaseModel):
    firstYear: int
    lastYear: int
    returns: List[AnnualReturnOut]

    @classmethod
    def from_table(cls, table: ReturnTable) -> "ReturnTableResponse":
        return cls(
            firstYear=table.first_year,
            lastYear=table.last_year,
            returns=[
                AnnualReturnOut(
                    year=row.year,
                    growthReturnPct=row.growth_return_pct,
                    incomeReturnPct=row.income_return_pct,
                )
                for row in table.rows
            ],
        )


class HoldingsResponse(BaseModel):
    holdings: Dict[str, List[Holding]]
