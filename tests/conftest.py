import json
from unittest.mock import MagicMock

import pytest

from app.telegram.client import TelegramClient


def make_payload(text="salam", update_id=1001, chat_id=4242, **message_fields):
    message = {"message_id": 7, "text": text, "chat": {"id": chat_id, "type": "private"}}
    message.update(message_fields)
    return json.dumps({"update_id": update_id, "message": message}).encode("utf-8")


def make_response(body, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.text = body
    try:
        parsed = json.loads(body)
    except ValueError as exc:
        response.json.side_effect = ValueError(str(exc))
    else:
        response.json.return_value = parsed
    return response


@pytest.fixture
def telegram_client():
    client = MagicMock(spec=TelegramClient)
    client.send_message.return_value = '{"ok":true,"result":{"message_id":8}}'
    return client
