import asyncio
import logging
import re

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from provexcalc.config import settings
from provexcalc.parsing.inputs import parse_date
from provexcalc.schemas.requests import EstimateRequest
from provexcalc.schemas.responses import EstimateResponse, RateQuoteResponse
from provexcalc.services.estimator import EstimateOrchestrator

logger = logging.getLogger(__name__)

_NUMBER_TOKEN = re.compile(r"\$?(\d+(?:\.\d+)?)x?", re.IGNORECASE)

orchestrator = EstimateOrchestrator()

USAGE = (
    "Send '<usd> [bonus] [YYYY-MM-DD]', e.g. '40000 2.2743 2025-12-10'.\n"
    "Use /rate [YYYY-MM-DD] to see the rate per 10,000 points."
)


def parse_message(text: str) -> EstimateRequest | None:
    """Split a free-text message into amount, bonus and date fields."""
    numbers: list[str] = []
    sacrifice_date: str | None = None

    for token in text.replace(",", "").split():
        if parse_date(token) is not None:
            sacrifice_date = token
            continue
        match = _NUMBER_TOKEN.fullmatch(token)
        if match:
            numbers.append(match.group(1))

    if not numbers:
        return None

    return EstimateRequest(
        usd=numbers[0],
        bonus=numbers[1] if len(numbers) > 1 else None,
        sacrifice_date=sacrifice_date,
    )


def format_reply(payload: EstimateResponse) -> str:
    display = payload.display
    return "\n".join(
        [
            f"Sacrifice: {display.usd_amount} @ {display.rate_per_10k} per 10,000 pts",
            f"Base points: {display.base_points}",
            f"Bonus: {display.bonus_multiplier}",
            f"Total est. points: {display.total_points}",
            f"Effective pts per $: {display.effective_points_per_usd}",
            "Rough estimate only, not official.",
        ]
    )


def format_rate_reply(quote: RateQuoteResponse) -> str:
    if quote.invalid:
        return f"Could not read date {quote.date!r}, expected YYYY-MM-DD."
    return f"{quote.date}: ${quote.display_rate} per 10,000 points"


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(f"ProveX sacrifice estimator (unofficial).\n{USAGE}")


async def rate(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    if context.args:
        quote = orchestrator.quote_rate(context.args[0])
    else:
        quote = orchestrator.quote_today()
    await update.message.reply_text(format_rate_reply(quote))


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    text = update.message.text or ""
    request = parse_message(text)
    if request is None:
        await update.message.reply_text(USAGE)
        return

    if request.sacrifice_date is None:
        request.sacrifice_date = orchestrator.quote_today().date

    await update.message.reply_text(format_reply(orchestrator.estimate(request)))


def main() -> None:
    if not settings.telegram_bot_token:
        raise ValueError("TELEGRAM_BOT_TOKEN is required.")

    app = Application.builder().token(settings.telegram_bot_token).build()
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("rate", rate))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    logger.info("Starting Telegram bot polling")
    app.run_polling()


if __name__ == "__main__":
    asyncio.run(asyncio.to_thread(main))
