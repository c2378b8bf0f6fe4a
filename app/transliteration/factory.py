from __future__ import annotations

import logging

from app.config import Settings
from app.transliteration.local import LocalTransliterator
from app.transliteration.remote import RemoteTransliterator
from app.transliteration.types import Transliterator

logger = logging.getLogger("finglish_bot")


def build_transliterator(settings: Settings) -> Transliterator:
    if settings.transliteration_backend == "remote":
        logger.info("Using remote transliteration service at %s", settings.transliteration_service_url)
        return RemoteTransliterator(
            service_url=settings.transliteration_service_url,
            timeout=settings.outbound_timeout_seconds,
        )
    return LocalTransliterator()
