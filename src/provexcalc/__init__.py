from provexcalc.domain.models import (
    DEFAULT_SCHEDULE,
    CalculationInput,
    CalculationResult,
    RatePeriod,
    RateResult,
    ScheduleConfig,
)
from provexcalc.engine.calculator import compute_points
from provexcalc.engine.schedule import RateSchedule, rate_for_date
from provexcalc.services.estimator import EstimateOrchestrator

__all__ = [
    "DEFAULT_SCHEDULE",
    "CalculationInput",
    "CalculationResult",
    "EstimateOrchestrator",
    "RatePeriod",
    "RateResult",
    "RateSchedule",
    "ScheduleConfig",
    "compute_points",
    "rate_for_date",
]
