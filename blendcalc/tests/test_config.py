from __future__ import annotations

from pathlib import Path

from blendcalc.config import Settings
from blendcalc.models import IncomeAssumptions


def test_defaults_match_reference_assumptions():
    settings = Settings(_env_file=None)

    assert settings.income_assumptions() == IncomeAssumptions()
    assert settings.returns_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BLENDCALC_TAX_RATE", "0.22")
    monkeypatch.setenv("BLENDCALC_INCOME_YIELD_PCT", "3.8")
    monkeypatch.setenv("BLENDCALC_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("BLENDCALC_RETURNS_FILE", "data/returns.json")

    settings = Settings(_env_file=None)
    assumptions = settings.income_assumptions()

    assert assumptions.tax_rate == 0.22
    assert assumptions.income_yield_pct == 3.8
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.returns_file == Path("data/returns.json")
