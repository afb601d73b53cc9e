from datetime import date
from enum import Enum

from pydantic import BaseModel

from provexcalc.domain.models import CalculationResult, RatePeriod


class RateSource(str, Enum):
    OVERRIDE = "override"
    SCHEDULE = "schedule"
    PREVIOUS = "previous"


class RateQuoteResponse(BaseModel):
    date: str | None = None
    rate: float | None = None
    display_rate: str | None = None
    period: RatePeriod | None = None
    invalid: bool = False


class EstimateDisplay(BaseModel):
    usd_amount: str
    rate_per_10k: str
    bonus_multiplier: str
    base_points: str
    total_points: str
    effective_points_per_usd: str


class EstimateResponse(BaseModel):
    usd_amount: float
    rate_per_10k: float
    bonus_multiplier: float
    rate_source: RateSource
    result: CalculationResult
    display: EstimateDisplay


class ScheduleResponse(BaseModel):
    start_date: date
    flat_end_date: date
    end_date: date
    base_rate: float
    daily_growth_rate: float
    max_rate: float
    description: str
