import pytest

from provexcalc.domain.models import CalculationInput
from provexcalc.engine.calculator import compute_for_input, compute_points


def test_sanity_check_from_estimator_page() -> None:
    base = compute_points(40000, 1.0, 1)
    boosted = compute_points(40000, 1.0, 2.2743)

    assert base.base_points == 400_000_000
    assert base.total_points == 400_000_000
    assert base.effective_points_per_usd == 10_000
    assert boosted.total_points == pytest.approx(909_720_000)


@pytest.mark.parametrize("rate, bonus", [(1.0, 1.0), (10.0115, 2.5), (0, 3)])
def test_zero_amount_yields_zero(rate: float, bonus: float) -> None:
    result = compute_points(0, rate, bonus)

    assert (result.base_points, result.total_points, result.effective_points_per_usd) == (0, 0, 0)


@pytest.mark.parametrize("rate", [0, -1.5])
def test_zero_or_negative_rate_short_circuits(rate: float) -> None:
    result = compute_points(1000, rate, 2)

    assert (result.base_points, result.total_points, result.effective_points_per_usd) == (0, 0, 0)


def test_total_is_base_times_bonus() -> None:
    plain = compute_points(1234.5, 3.3, 1)
    boosted = compute_points(1234.5, 3.3, 2.7053)

    assert boosted.base_points == plain.base_points
    assert boosted.total_points == pytest.approx(plain.base_points * 2.7053)
    assert boosted.effective_points_per_usd == pytest.approx(10_000 / 3.3 * 2.7053)


def test_results_are_idempotent() -> None:
    assert compute_points(777.77, 4.2, 1.9) == compute_points(777.77, 4.2, 1.9)


def test_compute_for_input_defaults_bonus_to_one() -> None:
    result = compute_for_input(CalculationInput(usd_amount=500, rate_per_10k=2))

    assert result.base_points == 2_500_000
    assert result.total_points == 2_500_000
