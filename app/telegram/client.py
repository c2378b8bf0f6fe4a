from __future__ import annotations

import logging
from typing import Any

import requests

from app.errors import DeliveryError
from app.models import OutboundReply

logger = logging.getLogger("finglish_bot")

SEND_MESSAGE_PATH = "/sendMessage"


class TelegramClient:
    def __init__(self, bot_token: str, api_base_url: str = "https://api.telegram.org", timeout: float = 15.0) -> None:
        self.bot_token = bot_token
        self.api_base_url = api_base_url
        self.timeout = timeout

    @property
    def send_message_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}{SEND_MESSAGE_PATH}"

    def send_message(self, chat_id: int, text: str) -> str:
        """Post ``text`` to ``chat_id`` and return Telegram's raw response body.

        Raises ``DeliveryError`` on transport failure, an undecodable body, or
        a body with ``ok`` not true. The error carries whatever body was read.
        """
        reply = OutboundReply(chat_id=chat_id, text=text)
        try:
            response = requests.post(self.send_message_url, data=reply.as_form(), timeout=self.timeout)
        except requests.RequestException as exc:
            raise DeliveryError(f"send message failed: {self._redact(str(exc))}") from exc

        body = response.text
        logger.info("Body of Telegram Response: %s", body)

        try:
            data: Any = response.json()
        except (ValueError, RecursionError) as exc:
            raise DeliveryError("could not decode Telegram response", response_body=body) from exc

        if not isinstance(data, dict) or data.get("ok") is not True:
            description = data.get("description", "") if isinstance(data, dict) else ""
            raise DeliveryError(
                f"Telegram rejected message (status {response.status_code}): {description}",
                response_body=body,
            )

        return body

    def _redact(self, message: str) -> str:
        # requests puts the full URL, token included, into its error text.
        if not self.bot_token:
            return message
        return message.replace(self.bot_token, "<redacted>")
