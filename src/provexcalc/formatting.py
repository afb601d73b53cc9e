import math

PLACEHOLDER = "-"


def format_number(value: float) -> str:
    if not math.isfinite(value):
        return PLACEHOLDER
    if value == 0:
        return "0"
    if abs(value) < 1:
        return f"{value:.4f}"

    text = f"{value:,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_rate(rate: float) -> str:
    return f"{rate:.4f}"


def format_points(value: float) -> str:
    if not value:
        return PLACEHOLDER
    return format_number(value)


def format_multiplier(value: float) -> str:
    if not value:
        return PLACEHOLDER
    return f"{format_number(value)}x"
