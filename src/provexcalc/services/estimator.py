import logging
from datetime import date, datetime, timezone

from provexcalc.engine.calculator import compute_points
from provexcalc.engine.schedule import RateSchedule, default_schedule, to_utc_date
from provexcalc.formatting import format_multiplier, format_number, format_points, format_rate
from provexcalc.parsing.inputs import parse_amount, parse_bonus, parse_rate
from provexcalc.schemas.requests import EstimateRequest
from provexcalc.schemas.responses import (
    EstimateDisplay,
    EstimateResponse,
    RateQuoteResponse,
    RateSource,
    ScheduleResponse,
)

logger = logging.getLogger(__name__)


class EstimateOrchestrator:
    def __init__(self, schedule: RateSchedule = default_schedule):
        self.schedule = schedule

    def _resolve_rate(self, request: EstimateRequest) -> tuple[float, RateSource]:
        if request.rate is not None and str(request.rate).strip():
            return parse_rate(request.rate), RateSource.OVERRIDE

        quoted = self.schedule.rate_for_date(request.sacrifice_date)
        if quoted is not None:
            # the form refills the rate field with four decimals
            return float(format_rate(quoted.rate)), RateSource.SCHEDULE

        previous = request.previous_rate
        if previous is None or previous < 0:
            previous = self.schedule.config.base_rate
        logger.debug(
            "Keeping previous rate %s, no usable date in %r", previous, request.sacrifice_date
        )
        return previous, RateSource.PREVIOUS

    def estimate(self, request: EstimateRequest) -> EstimateResponse:
        usd_amount = parse_amount(request.usd)
        bonus = parse_bonus(request.bonus)
        rate, source = self._resolve_rate(request)

        result = compute_points(usd_amount, rate, bonus)

        display = EstimateDisplay(
            usd_amount=f"${format_number(usd_amount)}",
            rate_per_10k=f"${format_number(rate)}",
            bonus_multiplier=format_multiplier(bonus),
            base_points=format_points(result.base_points),
            total_points=format_points(result.total_points),
            effective_points_per_usd=format_points(result.effective_points_per_usd),
        )

        return EstimateResponse(
            usd_amount=usd_amount,
            rate_per_10k=rate,
            bonus_multiplier=bonus,
            rate_source=source,
            result=result,
            display=display,
        )

    def quote_rate(self, value: date | datetime | str | None) -> RateQuoteResponse:
        quoted = self.schedule.rate_for_date(value)
        day = to_utc_date(value)
        if quoted is None or day is None:
            return RateQuoteResponse(date=value if isinstance(value, str) else None, invalid=True)

        return RateQuoteResponse(
            date=day.isoformat(),
            rate=quoted.rate,
            display_rate=format_rate(quoted.rate),
            period=quoted.period,
        )

    def quote_today(self, now: datetime | None = None) -> RateQuoteResponse:
        return self.quote_rate(now or datetime.now(timezone.utc))

    def schedule_summary(self) -> ScheduleResponse:
        cfg = self.schedule.config
        return ScheduleResponse(
            **cfg.model_dump(),
            description=self.schedule.describe(),
        )
