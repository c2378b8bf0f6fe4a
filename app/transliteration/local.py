"""
Finglish -> Farsi transliteration by fixed character substitution.

The scan is a single left-to-right pass. A digraph-capable letter followed by
``h`` consumes both characters and yields one glyph; ``e`` is silent; every
character outside the table (uppercase, digits, punctuation, Farsi glyphs)
is copied through unchanged. Input is expected to be lowercased already.
"""

from __future__ import annotations

SILENT = "e"

DIGRAPHS: dict[str, str] = {
    "ch": "چ",
    "gh": "غ",
    "kh": "خ",
    "sh": "ش",
}

LETTERS: dict[str, str] = {
    "a": "ا",
    "b": "ب",
    "c": "س",
    "d": "د",
    "f": "ف",
    "g": "گ",
    "h": "ه",
    "i": "ی",
    "j": "ج",
    "k": "ک",
    "l": "ل",
    "m": "م",
    "n": "ن",
    "o": "و",
    "p": "پ",
    "q": "ک",
    "r": "ر",
    "s": "س",
    "t": "ت",
    "u": "و",
    "v": "و",
    "w": "و",
    "x": "خ",
    "y": "ی",
    "z": "ز",
}


def transliterate(finglish: str) -> str:
    farsi: list[str] = []
    i = 0
    while i < len(finglish):
        pair = finglish[i : i + 2]
        if pair in DIGRAPHS:
            farsi.append(DIGRAPHS[pair])
            i += 2
            continue

        char = finglish[i]
        if char != SILENT:
            farsi.append(LETTERS.get(char, char))
        i += 1
    return "".join(farsi)


class LocalTransliterator:
    name = "local"

    def transliterate(self, text: str) -> str:
        return transliterate(text)
