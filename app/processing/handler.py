from __future__ import annotations

import logging
from dataclasses import dataclass

from app.errors import DecodeError, DeliveryError, InvalidUpdateError, RemoteServiceError
from app.telegram.client import TelegramClient
from app.telegram.parsing import parse_update
from app.transliteration.types import Transliterator

logger = logging.getLogger("finglish_bot")

OUTCOME_SENT = "sent"
OUTCOME_IGNORED = "ignored"
OUTCOME_DROPPED = "dropped"


@dataclass
class HandleResult:
    outcome: str
    chat_id: int | None = None
    response_body: str = ""
    error: Exception | None = None


class UpdateHandler:
    def __init__(
        self,
        telegram_client: TelegramClient,
        transliterator: Transliterator,
        start_command: str = "/start",
    ) -> None:
        self.telegram_client = telegram_client
        self.transliterator = transliterator
        self.start_command = start_command.lower()

    def handle(self, raw: bytes | str) -> HandleResult:
        try:
            return self._handle(raw)
        except Exception as exc:
            logger.exception("unexpected failure handling update")
            return HandleResult(outcome=OUTCOME_DROPPED, error=exc)

    def _handle(self, raw: bytes | str) -> HandleResult:
        try:
            update = parse_update(raw)
        except (DecodeError, InvalidUpdateError) as exc:
            logger.error("error parsing incoming update, %s", exc)
            return HandleResult(outcome=OUTCOME_DROPPED, error=exc)

        chat_id = update.message.chat.id
        incoming_text = update.message.text.lower()

        if incoming_text == self.start_command:
            logger.info("start command from chat id %d, nothing to send", chat_id)
            return HandleResult(outcome=OUTCOME_IGNORED, chat_id=chat_id)

        try:
            text = self.transliterator.transliterate(incoming_text)
        except RemoteServiceError as exc:
            logger.error("transliteration via %s failed for chat id %d: %s", self.transliterator.name, chat_id, exc)
            return HandleResult(outcome=OUTCOME_DROPPED, chat_id=chat_id, error=exc)

        logger.info("Sending %s to chat_id: %d", text, chat_id)
        try:
            body = self.telegram_client.send_message(chat_id, text)
        except DeliveryError as exc:
            logger.error("got error %s from telegram, response body is %s", exc, exc.response_body)
            return HandleResult(outcome=OUTCOME_DROPPED, chat_id=chat_id, response_body=exc.response_body, error=exc)

        logger.info("successfully distributed to chat id %d", chat_id)
        return HandleResult(outcome=OUTCOME_SENT, chat_id=chat_id, response_body=body)
