from __future__ import annotations

import logging
from typing import Any

import requests

from app.errors import RemoteServiceError

logger = logging.getLogger("finglish_bot")

# The conversion endpoint only answers browser-originated requests.
_BROWSER_HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64; rv:102.0) Gecko/20100101 Firefox/102.0",
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.5",
    "Content-Type": "text/plain",
    "Origin": "https://behnevis.com",
    "Referer": "https://behnevis.com/",
}


class RemoteTransliterator:
    name = "remote"

    def __init__(self, service_url: str, timeout: float = 15.0) -> None:
        self.service_url = service_url
        self.timeout = timeout

    def transliterate(self, text: str) -> str:
        logger.debug("Requesting remote transliteration from %s", self.service_url)
        try:
            response = requests.post(
                self.service_url,
                data=text.encode("utf-8"),
                headers=_BROWSER_HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteServiceError(f"transliteration request failed: {exc}") from exc

        try:
            result: Any = response.json()
        except (ValueError, RecursionError) as exc:
            raise RemoteServiceError(
                f"transliteration response is not JSON: {response.text[:200]!r}"
            ) from exc

        return self._join_words(result)

    @staticmethod
    def _join_words(result: Any) -> str:
        if not isinstance(result, dict):
            raise RemoteServiceError(f"expected a JSON object, got {type(result).__name__}")

        words: list[str] = []
        for key, value in result.items():
            if not isinstance(value, str):
                raise RemoteServiceError(f"non-string value for {key!r} in transliteration response")
            words.append(value)
        return "".join(words)
