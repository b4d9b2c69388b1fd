"""Heuristic language detection.

An ordered, first-match-wins chain of cheap checks:

1. Unicode script ranges (Cyrillic, Greek, Arabic, CJK, Kana, Hangul,
   Devanagari). These are unambiguous and always run before step 2.
2. Whole-word stop-word lists for Latin-script languages, tried in the
   order English, Spanish, French, German.
3. DEFAULT_LANGUAGE.

This is a coarse classifier. Mixed-script text resolves to the first rule
that fires, not to the dominant script, and short Latin text can be claimed
by an earlier stop-word list (e.g. "le" is also Spanish).
"""

from __future__ import annotations

import re
from typing import Iterable, Pattern

DEFAULT_LANGUAGE = "English"

# Order matters: first match wins.
SCRIPT_RULES: tuple[tuple[str, str], ...] = (
    ("Russian", r"\u0400-\u052F"),
    ("Greek", r"\u0370-\u03FF\u1F00-\u1FFF"),
    ("Arabic", r"\u0600-\u06FF\u0750-\u077F\uFB50-\uFDFF\uFE70-\uFEFF"),
    ("Chinese", r"\u3400-\u4DBF\u4E00-\u9FFF"),
    ("Japanese", r"\u3040-\u30FF\u31F0-\u31FF\uFF66-\uFF9F"),
    ("Korean", r"\u1100-\u11FF\u3130-\u318F\uAC00-\uD7AF"),
    ("Hindi", r"\u0900-\u097F"),
)

STOP_WORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "English",
        ("the", "and", "is", "in", "to", "of", "a", "that", "it", "with",
         "for", "as", "was", "on", "are", "you"),
    ),
    (
        "Spanish",
        ("el", "la", "en", "de", "que", "y", "un", "es", "se", "no", "te",
         "lo", "le", "da", "su", "por", "son", "con", "para", "una"),
    ),
    (
        "French",
        ("le", "de", "et", "à", "un", "il", "être", "en", "avoir", "que",
         "pour", "dans", "ce", "son", "une", "sur", "avec", "ne", "se"),
    ),
    (
        "German",
        ("der", "die", "und", "in", "den", "von", "zu", "das", "mit", "sich",
         "des", "auf", "für", "ist", "im", "dem", "nicht", "ein", "eine"),
    ),
)


def _script_pattern(ranges: str) -> Pattern[str]:
    return re.compile(f"[{ranges}]")


def _word_pattern(words: Iterable[str]) -> Pattern[str]:
    unique = dict.fromkeys(words)
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in unique) + r")\b")


class LanguageDetector:
    """Deterministic, total text -> language name classifier."""

    def __init__(self, default: str = DEFAULT_LANGUAGE) -> None:
        self.default = default
        self._rules: list[tuple[str, Pattern[str]]] = [
            (name, _script_pattern(ranges)) for name, ranges in SCRIPT_RULES
        ]
        self._rules.extend(
            (name, _word_pattern(words)) for name, words in STOP_WORDS
        )

    def detect(self, text: str | None) -> str:
        """Return the best-guess language name for ``text``.

        Never raises. None, empty and unmatched input return the default.
        """
        if not text:
            return self.default
        cleaned = text.lower().strip()
        for name, pattern in self._rules:
            if pattern.search(cleaned):
                return name
        return self.default


detector = LanguageDetector()


def detect_language(text: str | None) -> str:
    """Module-level shortcut using a shared LanguageDetector."""
    return detector.detect(text)
