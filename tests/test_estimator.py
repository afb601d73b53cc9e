from datetime import datetime, timezone

from provexcalc.schemas.requests import EstimateRequest
from provexcalc.schemas.responses import RateSource
from provexcalc.services.estimator import EstimateOrchestrator

orchestrator = EstimateOrchestrator()


def test_schedule_rate_is_used_when_no_override() -> None:
    response = orchestrator.estimate(
        EstimateRequest(usd="1000", bonus="2.0", sacrifice_date="2025-12-10")
    )

    assert response.rate_source == RateSource.SCHEDULE
    assert response.rate_per_10k == float(f"{1.0625**7:.4f}")
    assert response.result.base_points == 1000 * (10_000 / response.rate_per_10k)


def test_explicit_rate_overrides_date() -> None:
    response = orchestrator.estimate(
        EstimateRequest(usd="40000", rate="1.0000", bonus="2.2743", sacrifice_date="2026-01-09")
    )

    assert response.rate_source == RateSource.OVERRIDE
    assert response.result.base_points == 400_000_000
    assert response.display.base_points == "400,000,000"
    assert response.display.total_points == "909,720,000"
    assert response.display.bonus_multiplier == "2.27x"
    assert response.display.usd_amount == "$40,000"


def test_invalid_date_keeps_previous_rate() -> None:
    response = orchestrator.estimate(
        EstimateRequest(usd="100", sacrifice_date="31/12/2025", previous_rate=2.5)
    )

    assert response.rate_source == RateSource.PREVIOUS
    assert response.rate_per_10k == 2.5


def test_missing_everything_degrades_to_defaults() -> None:
    response = orchestrator.estimate(EstimateRequest())

    assert response.usd_amount == 0
    assert response.bonus_multiplier == 1
    assert response.rate_per_10k == 1.0
    assert response.result.total_points == 0
    assert response.display.base_points == "-"
    assert response.display.effective_points_per_usd == "-"


def test_unparsable_override_rate_yields_zero_points() -> None:
    response = orchestrator.estimate(EstimateRequest(usd="100", rate="abc"))

    assert response.rate_source == RateSource.OVERRIDE
    assert response.rate_per_10k == 0
    assert response.result.base_points == 0


def test_quote_rate() -> None:
    quote = orchestrator.quote_rate("2026-02-01")

    assert quote.invalid is False
    assert quote.rate == 10.0115
    assert quote.display_rate == "10.0115"
    assert quote.date == "2026-02-01"


def test_quote_rate_invalid() -> None:
    quote = orchestrator.quote_rate("nope")

    assert quote.invalid is True
    assert quote.rate is None
    assert quote.date == "nope"


def test_quote_today_uses_given_clock() -> None:
    quote = orchestrator.quote_today(datetime(2025, 11, 20, 12, tzinfo=timezone.utc))

    assert quote.date == "2025-11-20"
    assert quote.display_rate == "1.0000"


def test_schedule_summary() -> None:
    summary = orchestrator.schedule_summary()

    assert summary.max_rate == 10.0115
    assert summary.daily_growth_rate == 0.0625
    assert "6.25%" in summary.description
