import argparse
import logging

from provexcalc.api.app import run as run_api
from provexcalc.config import settings
from provexcalc.integrations.telegram_bot import format_reply
from provexcalc.integrations.telegram_bot import main as run_bot
from provexcalc.schemas.requests import EstimateRequest
from provexcalc.services.estimator import EstimateOrchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ProveX sacrifice calculator entrypoint")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["api", "bot", "estimate"],
        default="api",
        help="Run mode: api (default), bot, estimate",
    )
    parser.add_argument("--usd", help="Sacrifice amount in USD")
    parser.add_argument("--rate", help="Override rate in USD per 10,000 points")
    parser.add_argument("--bonus", help="Bonus multiplier, e.g. 2.2743")
    parser.add_argument("--date", help="Sacrifice date (YYYY-MM-DD), used when --rate is absent")
    return parser


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args()

    if args.mode == "api":
        run_api()
        return

    if args.mode == "bot":
        run_bot()
        return

    request = EstimateRequest(usd=args.usd, rate=args.rate, bonus=args.bonus, sacrifice_date=args.date)
    print(format_reply(EstimateOrchestrator().estimate(request)))


if __name__ == "__main__":
    main()
