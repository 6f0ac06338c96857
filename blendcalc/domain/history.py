"""Historical annual return table for the two blended instruments.

Values are signed percentage returns for (growth, income) keyed by calendar
year. The bundled reference dataset covers 2014-2025 (QQQ vs SCHD, sourced from
Portfolio Visualizer and Yahoo Finance).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from blendcalc.models import AnnualReturn


class ReturnTableError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class ReturnTable(BaseModel):
    """Immutable, strictly ascending-by-year sequence of annual returns."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rows: Tuple[AnnualReturn, ...]

    @property
    def years(self) -> List[int]:
        return [row.year for row in self.rows]

    @property
    def first_year(self) -> int:
        return self.rows[0].year

    @property
    def last_year(self) -> int:
        return self.rows[-1].year


class Holding(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    symbol: str
    weight: float


def _check_order(rows: Tuple[AnnualReturn, ...]) -> List[str]:
    errors: List[str] = []
    if not rows:
        errors.append("return table requires at least one year")
        return errors

    for previous, current in zip(rows, rows[1:]):
        if current.year == previous.year:
            errors.append(f"duplicate year {current.year}")
        elif current.year < previous.year:
            errors.append(f"years out of order at {previous.year}-{current.year}")
    return errors


def build_table(rows: Iterable[Union[AnnualReturn, Dict[str, Any]]]) -> ReturnTable:
    """
    Validate raw rows into a ReturnTable.

    Accepts AnnualReturn instances or dicts using either snake_case keys or the
    camelCase keys (growthReturnPct / incomeReturnPct) used in JSON files.
    """
    parsed: List[AnnualReturn] = []
    errors: List[str] = []
    for index, row in enumerate(rows):
        if isinstance(row, AnnualReturn):
            parsed.append(row)
            continue
        if not isinstance(row, dict):
            errors.append(f"row {index} is not an object")
            continue
        normalized = {
            "year": row.get("year"),
            "growth_return_pct": row.get("growth_return_pct", row.get("growthReturnPct")),
            "income_return_pct": row.get("income_return_pct", row.get("incomeReturnPct")),
        }
        try:
            parsed.append(AnnualReturn.model_validate(normalized))
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
            errors.append(f"row {index} invalid fields: {fields}")

    if errors:
        raise ReturnTableError(errors)

    ordered = tuple(parsed)
    order_errors = _check_order(ordered)
    if order_errors:
        raise ReturnTableError(order_errors)
    return ReturnTable(rows=ordered)


def load_table(path: Union[str, Path]) -> ReturnTable:
    """Read a JSON list of {year, growthReturnPct, incomeReturnPct} objects."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ReturnTableError([f"cannot read {path}: {exc}"]) from exc
    except json.JSONDecodeError as exc:
        raise ReturnTableError([f"{path} is not valid JSON: {exc.msg}"]) from exc

    if not isinstance(raw, list):
        raise ReturnTableError([f"{path} must contain a JSON list of yearly returns"])
    return build_table(raw)


REFERENCE_RETURNS: Tuple[Tuple[int, float, float], ...] = (
    (2014, 19.18, 15.82),
    (2015, 9.45, -0.32),
    (2016, 7.10, 16.05),
    (2017, 32.66, 21.03),
    (2018, -0.14, -5.56),
    (2019, 38.96, 27.27),
    (2020, 48.60, 15.11),
    (2021, 27.24, 29.87),
    (2022, -32.58, -3.23),
    (2023, 54.85, 4.57),
    (2024, 22.11, 18.90),
    (2025, 14.50, 11.20),
)

REFERENCE_TABLE: ReturnTable = build_table(
    AnnualReturn(year=year, growth_return_pct=growth, income_return_pct=income)
    for year, growth, income in REFERENCE_RETURNS
)

# Largest positions of each fund, percent of fund assets.
REFERENCE_HOLDINGS: Dict[str, Tuple[Holding, ...]] = {
    "growth": (
        Holding(name="Apple", symbol="AAPL", weight=12.4),
        Holding(name="Microsoft", symbol="MSFT", weight=9.8),
        Holding(name="NVIDIA", symbol="NVDA", weight=4.5),
    ),
    "income": (
        Holding(name="AbbVie", symbol="ABBV", weight=4.4),
        Holding(name="Home Depot", symbol="HD", weight=4.2),
        Holding(name="Chevron", symbol="CVX", weight=4.1),
    ),
}


__all__ = [
    "Holding",
    "REFERENCE_HOLDINGS",
    "REFERENCE_RETURNS",
    "REFERENCE_TABLE",
    "ReturnTable",
    "ReturnTableError",
    "build_table",
    "load_table",
]
