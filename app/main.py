import asyncio
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.processing.handler import UpdateHandler
from app.telegram.client import TelegramClient
from app.transliteration.factory import build_transliterator

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger("finglish_bot")

telegram_client = TelegramClient(
    bot_token=settings.telegram_bot_token,
    api_base_url=settings.telegram_api_base_url,
    timeout=settings.outbound_timeout_seconds,
)
update_handler = UpdateHandler(
    telegram_client=telegram_client,
    transliterator=build_transliterator(settings),
    start_command=settings.start_command,
)

app = FastAPI(title="Finglish Telegram Bot", version="0.1.0")


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/telegram/webhook")
async def telegram_webhook(request: Request):
    body = await request.body()
    result = await asyncio.to_thread(update_handler.handle, body)
    logger.debug("update handled: outcome=%s chat_id=%s", result.outcome, result.chat_id)

    # Failures stay silent to Telegram so it does not redeliver the update.
    return JSONResponse(status_code=200, content={"ok": True})
