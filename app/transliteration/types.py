from __future__ import annotations

from typing import Protocol


class Transliterator(Protocol):
    name: str

    def transliterate(self, text: str) -> str:
        ...
