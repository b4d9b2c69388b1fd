"""Fixed table of supported languages and their provider codes.

The table is process-wide constant state: built once at import time,
exposed read-only, never mutated at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

LANGUAGE_CODES: Mapping[str, str] = MappingProxyType(
    {
        "English": "en",
        "Spanish": "es",
        "French": "fr",
        "German": "de",
        "Italian": "it",
        "Portuguese": "pt",
        "Russian": "ru",
        "Chinese": "zh",
        "Japanese": "ja",
        "Korean": "ko",
        "Arabic": "ar",
        "Hindi": "hi",
        "Dutch": "nl",
        "Polish": "pl",
        "Turkish": "tr",
        "Swedish": "sv",
        "Norwegian": "no",
        "Danish": "da",
        "Finnish": "fi",
        "Greek": "el",
    }
)


class LanguageCatalog:
    """Bidirectional name <-> code lookup over a fixed language table."""

    def __init__(self, codes: Mapping[str, str] = LANGUAGE_CODES) -> None:
        self._codes = MappingProxyType(dict(codes))
        self._names = MappingProxyType({code: name for name, code in codes.items()})

    def code_for(self, name: str) -> str:
        """Return the provider code for a language name.

        Lookup is exact and case-sensitive. An unknown name is returned
        unchanged: the provider accepts raw codes as well, so callers may
        pass "fr" or "pt-BR" directly.
        """
        code = self._codes.get(name)
        if code is None:
            return name
        return code

    def name_for(self, code: str) -> str | None:
        """Reverse lookup. None when the code is not in the table."""
        return self._names.get(code)

    def language_names(self) -> list[str]:
        """All language names in table order."""
        return list(self._codes)

    def __contains__(self, name: object) -> bool:
        return name in self._codes

    def __len__(self) -> int:
        return len(self._codes)


catalog = LanguageCatalog()
