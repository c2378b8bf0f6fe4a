from __future__ import annotations

import logging

from app.errors import DecodeError, InvalidUpdateError
from app.models import Update

logger = logging.getLogger("finglish_bot")


def parse_update(raw: bytes | str) -> Update:
    """Decode a webhook body into an ``Update``.

    Telegram never numbers an update zero, so ``update_id == 0`` (including an
    absent field) is treated as a failed parse. A real update numbered zero
    would be rejected too.
    """
    try:
        update = Update.model_validate_json(raw)
    except (ValueError, RecursionError) as exc:  # pydantic ValidationError and bad encodings
        logger.warning("could not decode incoming update: %s", exc)
        raise DecodeError(str(exc)) from exc

    if update.update_id == 0:
        logger.warning("invalid update id, got update id = 0")
        raise InvalidUpdateError("invalid update id of 0 indicates failure to parse incoming update")

    return update
