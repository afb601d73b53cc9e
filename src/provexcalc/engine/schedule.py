import logging
from datetime import date, datetime, timezone

from provexcalc.domain.models import DEFAULT_SCHEDULE, RatePeriod, RateResult, ScheduleConfig
from provexcalc.parsing.inputs import parse_date

logger = logging.getLogger(__name__)


def to_utc_date(value: date | datetime | str | None) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(value)


class RateSchedule:
    """Maps a calendar date to a conversion rate (USD per 10,000 points).

    The rate is flat from ``start_date`` through ``flat_end_date`` inclusive.
    The day after ``flat_end_date`` is growth day 0, and each later day
    compounds ``daily_growth_rate`` on top of the base rate until
    ``max_rate`` or ``end_date`` is reached.
    """

    def __init__(self, config: ScheduleConfig = DEFAULT_SCHEDULE):
        self.config = config

    def rate_for_date(self, value: date | datetime | str | None) -> RateResult | None:
        """Return the rate for ``value``, or ``None`` when it is not a valid date."""
        day = to_utc_date(value)
        if day is None:
            logger.debug("No rate for unparsable date %r", value)
            return None

        cfg = self.config

        if day < cfg.start_date:
            return RateResult(rate=cfg.base_rate, period=RatePeriod.PRE_START)

        if day >= cfg.end_date:
            return RateResult(rate=cfg.max_rate, period=RatePeriod.CAPPED)

        if day <= cfg.flat_end_date:
            return RateResult(rate=cfg.base_rate, period=RatePeriod.FLAT)

        days_elapsed = (day - cfg.flat_end_date).days - 1
        rate = cfg.base_rate * (1 + cfg.daily_growth_rate) ** days_elapsed
        if rate > cfg.max_rate:
            return RateResult(rate=cfg.max_rate, period=RatePeriod.CAPPED, days_elapsed=days_elapsed)

        return RateResult(rate=rate, period=RatePeriod.GROWTH, days_elapsed=days_elapsed)

    def today(self, now: datetime | None = None) -> RateResult:
        current = now or datetime.now(timezone.utc)
        # a datetime always resolves to a date
        return self.rate_for_date(current)  # type: ignore[return-value]

    def describe(self) -> str:
        cfg = self.config
        return (
            f"{cfg.start_date.isoformat()} -> {cfg.flat_end_date.isoformat()}: "
            f"${cfg.base_rate:.4f} per 10,000 points. After that, the rate increases "
            f"{cfg.daily_growth_rate:.2%} per day until {cfg.end_date.isoformat()}, "
            f"capped at ${cfg.max_rate:.4f}."
        )


default_schedule = RateSchedule()


def rate_for_date(value: date | datetime | str | None) -> RateResult | None:
    return default_schedule.rate_for_date(value)
