from provexcalc.domain.models import CalculationInput, CalculationResult

POINTS_PER_RATE_UNIT = 10_000


def compute_points(
    usd_amount: float, rate_per_10k: float, bonus_multiplier: float = 1.0
) -> CalculationResult:
    base_points = 0.0
    if usd_amount > 0 and rate_per_10k > 0:
        # rate is USD per 10,000 points
        base_points = usd_amount * (POINTS_PER_RATE_UNIT / rate_per_10k)

    total_points = base_points * bonus_multiplier
    effective = total_points / usd_amount if usd_amount > 0 else 0.0

    return CalculationResult(
        base_points=base_points,
        total_points=total_points,
        effective_points_per_usd=effective,
    )


def compute_for_input(calc_input: CalculationInput) -> CalculationResult:
    return compute_points(
        calc_input.usd_amount,
        calc_input.rate_per_10k,
        calc_input.bonus_multiplier,
    )
