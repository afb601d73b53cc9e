from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScheduleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: date
    flat_end_date: date
    end_date: date
    base_rate: float = Field(gt=0)
    daily_growth_rate: float = Field(gt=0)
    max_rate: float = Field(gt=0)

    @model_validator(mode="after")
    def ensure_validity(self) -> "ScheduleConfig":
        if not self.start_date <= self.flat_end_date <= self.end_date:
            raise ValueError("start_date <= flat_end_date <= end_date is required")
        if self.max_rate < self.base_rate:
            raise ValueError("max_rate must not be below base_rate")
        return self


# ProveX sacrifice window: $1 per 10,000 points from 2025-11-11 through
# 2025-12-02, then +6.25% per day until 2026-01-09.
DEFAULT_SCHEDULE = ScheduleConfig(
    start_date=date(2025, 11, 11),
    flat_end_date=date(2025, 12, 2),
    end_date=date(2026, 1, 9),
    base_rate=1.0,
    daily_growth_rate=0.0625,
    max_rate=10.0115,
)


class RatePeriod(str, Enum):
    PRE_START = "pre_start"
    FLAT = "flat"
    GROWTH = "growth"
    CAPPED = "capped"


class RateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: float = Field(ge=0)
    period: RatePeriod
    days_elapsed: int | None = None


class CalculationInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    usd_amount: float = Field(default=0, ge=0)
    rate_per_10k: float = Field(default=0, ge=0)
    bonus_multiplier: float = Field(default=1, ge=0)


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_points: float
    total_points: float
    effective_points_per_usd: float
