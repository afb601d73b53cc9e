import math
import re
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(text: str | float | int | None, default: float) -> float:
    """Leniently parse a decimal number from user text.

    Uses the longest leading decimal literal and ignores whatever follows it,
    so ``"40000 USD"`` parses as ``40000``. Missing, unparsable, non-finite or
    zero values fall back to ``default``.
    """
    if text is None or isinstance(text, bool):
        return default

    if isinstance(text, (int, float)):
        value = float(text)
    else:
        match = _LEADING_NUMBER.match(text)
        if not match:
            return default
        value = float(match.group(1))

    if not math.isfinite(value) or value == 0:
        return default
    return value


def parse_amount(text: str | float | None) -> float:
    return max(parse_number(text, 0.0), 0.0)


def parse_rate(text: str | float | None) -> float:
    return max(parse_number(text, 0.0), 0.0)


def parse_bonus(text: str | float | None) -> float:
    # a zero bonus is indistinguishable from "not entered" and falls back to 1x
    value = parse_number(text, 1.0)
    return value if value > 0 else 1.0


def parse_date(text: str | None) -> date | None:
    if not text or not text.strip():
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        return None
