"""Pydantic settings for the blend calculator."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blendcalc.models import IncomeAssumptions


class Settings(BaseSettings):
    """Application settings loaded from BLENDCALC_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BLENDCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Income assumptions
    growth_yield_pct: float = Field(default=0.6, ge=0, allow_inf_nan=False, description="Long-run cash yield of the growth fund (%)")
    income_yield_pct: float = Field(default=3.4, ge=0, allow_inf_nan=False, description="Long-run cash yield of the income fund (%)")
    tax_rate: float = Field(default=0.15, ge=0, le=1, allow_inf_nan=False, description="Flat dividend tax rate")
    savings_rate: float = Field(default=0.035, ge=-1, allow_inf_nan=False, description="Annual rate of the deposit benchmark")

    # Return table override; the bundled reference table is used when unset
    returns_file: Optional[Path] = Field(default=None, description="JSON file with yearly returns")

    # HTTP
    cors_origins: Union[List[str], str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"],
        description="Origins allowed to call /api/*",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("cors_origins", mode="after")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse comma-separated origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("returns_file", mode="before")
    @classmethod
    def parse_returns_file(cls, v):
        if isinstance(v, str):
            return Path(v) if v.strip() else None
        return v

    def income_assumptions(self) -> IncomeAssumptions:
        return IncomeAssumptions(
            growth_yield_pct=self.growth_yield_pct,
            income_yield_pct=self.income_yield_pct,
            tax_rate=self.tax_rate,
            savings_rate=self.savings_rate,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
